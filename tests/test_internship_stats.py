import unittest
from types import SimpleNamespace

from certifytrack.models import DifficultyLevel, Submission, SubmissionStatus, SubscriptionStatus, Task
from certifytrack.services.internship_service import compute_internship_stats


def task(difficulty="medium", mandatory=True, statuses=()):
    return SimpleNamespace(
        difficulty_level=difficulty,
        is_mandatory=mandatory,
        submissions=[SimpleNamespace(status=s) for s in statuses],
    )


def subscription(status):
    return SimpleNamespace(status=status)


class TestComputeInternshipStats(unittest.TestCase):

    def setUp(self):
        self.tasks = [
            task("easy", True, ["pending", "approved", "approved"]),
            task("medium", False, ["rejected"]),
            task("hard", True, []),
            task("hard", False, ["pending"]),
        ]
        self.subscriptions = [
            subscription("active"),
            subscription("active"),
            subscription("completed"),
            subscription("cancelled"),
        ]

    def test_counts(self):
        stats = compute_internship_stats(self.tasks, self.subscriptions)
        self.assertEqual(stats.total_students, 4)
        self.assertEqual(stats.active_students, 2)
        self.assertEqual(stats.completed_students, 1)
        self.assertEqual(stats.total_tasks, 4)
        self.assertEqual(stats.mandatory_tasks, 2)
        self.assertEqual(stats.tasks_by_difficulty.model_dump(), {"easy": 1, "medium": 1, "hard": 2})
        self.assertEqual(stats.total_submissions, 5)
        self.assertEqual(stats.pending_submissions, 2)
        self.assertEqual(stats.approved_submissions, 2)
        self.assertEqual(stats.rejected_submissions, 1)

    def test_partitions_add_up(self):
        stats = compute_internship_stats(self.tasks, self.subscriptions)
        self.assertEqual(
            stats.total_submissions,
            stats.pending_submissions + stats.approved_submissions + stats.rejected_submissions,
        )
        by_difficulty = stats.tasks_by_difficulty
        self.assertEqual(stats.total_tasks, by_difficulty.easy + by_difficulty.medium + by_difficulty.hard)
        self.assertLessEqual(stats.mandatory_tasks, stats.total_tasks)

    def test_empty_internship_is_all_zero(self):
        stats = compute_internship_stats([], [])
        dumped = stats.model_dump()
        tasks_by_difficulty = dumped.pop("tasks_by_difficulty")
        self.assertTrue(all(value == 0 for value in dumped.values()))
        self.assertEqual(tasks_by_difficulty, {"easy": 0, "medium": 0, "hard": 0})

    def test_missing_collections_count_as_empty(self):
        stats = compute_internship_stats(None, None)
        self.assertEqual(stats.total_tasks, 0)
        self.assertEqual(stats.total_students, 0)

        stats = compute_internship_stats([SimpleNamespace(difficulty_level="easy", is_mandatory=True)], None)
        self.assertEqual(stats.total_tasks, 1)
        self.assertEqual(stats.total_submissions, 0)

        stats = compute_internship_stats([task("easy")] + [SimpleNamespace(
            difficulty_level="hard", is_mandatory=False, submissions=None)], [])
        self.assertEqual(stats.total_tasks, 2)
        self.assertEqual(stats.total_submissions, 0)

    def test_accepts_enum_statuses_from_models(self):
        tasks = [
            Task(title="t", assigned_day=1, difficulty_level=DifficultyLevel.easy, is_mandatory=True,
                 submissions=[Submission(status=SubmissionStatus.approved)]),
        ]
        stats = compute_internship_stats(tasks, [subscription(SubscriptionStatus.active)])
        self.assertEqual(stats.tasks_by_difficulty.easy, 1)
        self.assertEqual(stats.approved_submissions, 1)
        self.assertEqual(stats.active_students, 1)
