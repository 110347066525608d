from .user import User, UserRole
from .certificate_template import CertificateTemplate, CertificateTemplateBase, IssuedCertificate
from .course import Course, CourseBase, CourseCertificate, COURSE_LIST_FIELDS
from .internship import (
    Internship,
    InternshipBase,
    InternshipMode,
    InternshipStatus,
    PriceType,
    INTERNSHIP_LIST_FIELDS,
)
from .submission import Submission, SubmissionStatus
from .task import Task, TaskBase, TaskContentBase, DifficultyLevel, TASK_LIST_FIELDS
from .course_task import CourseTask, CourseTaskBase, CourseTaskSubmission
from .subscription import Subscription, SubscriptionStatus
from .mentor import Mentor, MentorBase
