import unittest
import uuid
from datetime import timedelta

from certifytrack.errors import InvalidTransitionError, NotAuthenticatedError
from certifytrack.models import Submission, SubmissionStatus, UserRole
from certifytrack.schemas.submission_schema import ReviewDecision
from certifytrack.services import submission_service
from tests.db_utils import add_internship, add_task, add_user, an_hour_ago, make_session


class TestSubmissionService(unittest.TestCase):

    def setUp(self):
        self.db = make_session()
        self.reviewer = add_user(self.db)
        self.student = add_user(self.db, role=UserRole.user, full_name="Sam Student")
        self.internship = add_internship(self.db, title="Web Internship")
        self.task = add_task(self.db, self.internship, title="Build an API", assigned_day=2)

    def tearDown(self):
        self.db.close()

    def submit(self, **fields) -> Submission:
        fields.setdefault("submitted_at", an_hour_ago())
        submission = Submission(task_id=self.task.id, user_id=self.student.id, **fields)
        self.db.add(submission)
        self.db.commit()
        self.db.refresh(submission)
        return submission

    def test_approve_pending_submission(self):
        submission = self.submit()
        self.assertEqual(submission.status, SubmissionStatus.pending)

        reviewed = submission_service.update_submission_status(
            self.db, submission.id, ReviewDecision.approved, self.reviewer.id
        )
        self.assertEqual(reviewed.status, SubmissionStatus.approved)
        self.assertIsNotNone(reviewed.reviewed_at)
        self.assertGreaterEqual(reviewed.reviewed_at, reviewed.submitted_at)
        self.assertEqual(reviewed.reviewer_id, self.reviewer.id)

    def test_reject_accepts_plain_string(self):
        submission = self.submit()
        reviewed = submission_service.update_submission_status(self.db, submission.id, "rejected", self.reviewer.id)
        self.assertEqual(reviewed.status, SubmissionStatus.rejected)

    def test_reviewed_submission_is_terminal(self):
        submission = self.submit()
        submission_service.update_submission_status(self.db, submission.id, ReviewDecision.approved, self.reviewer.id)
        with self.assertRaises(InvalidTransitionError):
            submission_service.update_submission_status(
                self.db, submission.id, ReviewDecision.rejected, self.reviewer.id
            )
        self.db.refresh(submission)
        self.assertEqual(submission.status, SubmissionStatus.approved)

    def test_pending_is_not_a_review_target(self):
        submission = self.submit()
        with self.assertRaises(ValueError):
            submission_service.update_submission_status(self.db, submission.id, "pending", self.reviewer.id)

    def test_missing_reviewer_aborts_without_writing(self):
        submission = self.submit()
        with self.assertRaises(NotAuthenticatedError):
            submission_service.update_submission_status(self.db, submission.id, ReviewDecision.approved, None)
        self.db.refresh(submission)
        self.assertEqual(submission.status, SubmissionStatus.pending)
        self.assertIsNone(submission.reviewed_at)
        self.assertIsNone(submission.reviewer_id)

    def test_unknown_submission(self):
        self.assertIsNone(submission_service.update_submission_status(
            self.db, uuid.uuid4(), ReviewDecision.approved, self.reviewer.id))
        self.assertIsNone(submission_service.get_submission_by_id(self.db, uuid.uuid4()))

    def test_listing_includes_student_and_internship(self):
        submitted = an_hour_ago()
        older = self.submit(text_answer="first try", submitted_at=submitted)
        newer = self.submit(text_answer="second try", submitted_at=submitted + timedelta(minutes=5))
        items = submission_service.get_all_submissions(self.db)
        self.assertEqual([item.id for item in items], [newer.id, older.id])
        self.assertEqual(items[0].user.full_name, "Sam Student")
        self.assertEqual(items[0].task.title, "Build an API")
        self.assertEqual(items[0].task.internship.title, "Web Internship")
        self.assertEqual(len(submission_service.list_by_task(self.db, self.task.id)), 2)
        self.assertEqual(submission_service.list_by_task(self.db, uuid.uuid4()), [])

    def test_detail_includes_answer_payload(self):
        submission = self.submit(code_snippet="print('hi')", external_links=["https://github.com/x/y"])
        detail = submission_service.get_submission_by_id(self.db, submission.id)
        self.assertEqual(detail.code_snippet, "print('hi')")
        self.assertEqual(detail.external_links, ["https://github.com/x/y"])
        self.assertEqual(detail.image_urls, [])
        self.assertEqual(detail.task.internship_id, self.internship.id)
