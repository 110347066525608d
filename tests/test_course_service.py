import unittest
import uuid

from certifytrack.errors import NotAuthenticatedError
from certifytrack.models import CertificateTemplate, Course, CourseCertificate
from certifytrack.schemas.course_schema import CourseCreate, CourseUpdate
from certifytrack.services import course_service
from sqlmodel import select
from tests.db_utils import add_user, make_session


class TestCourseService(unittest.TestCase):

    def setUp(self):
        self.db = make_session()
        self.admin = add_user(self.db)
        self.completion = CertificateTemplate(name="Completion", template_json={"layout": "a4"})
        self.excellence = CertificateTemplate(name="Excellence")
        self.db.add_all([self.completion, self.excellence])
        self.db.commit()

    def tearDown(self):
        self.db.close()

    def links(self, course_id):
        return self.db.exec(select(CourseCertificate).where(CourseCertificate.course_id == course_id)).all()

    def test_create_normalises_and_links_certificates(self):
        data = CourseCreate(title="Python for Data!", tags=["python"], certificate_templates=[self.completion.id])
        course = course_service.create_course(self.db, data, self.admin.id)

        self.assertEqual(course.slug, "python-for-data-")
        self.assertEqual(course.created_by, self.admin.id)
        self.assertEqual(course.tags, ["python"])
        self.assertEqual(course.mentors, [])
        self.assertEqual(course.features, [])
        self.assertFalse(course.is_published)
        self.assertEqual([link.certificate_id for link in self.links(course.id)], [self.completion.id])

    def test_create_with_null_published_flag(self):
        data = CourseCreate.model_validate({"title": "Rust", "is_published": None, "tags": None})
        course = course_service.create_course(self.db, data, self.admin.id)
        self.assertFalse(course.is_published)
        self.assertEqual(course.tags, [])

    def test_create_without_identity_is_aborted(self):
        with self.assertRaises(NotAuthenticatedError):
            course_service.create_course(self.db, CourseCreate(title="Nope"), None)
        self.assertEqual(self.db.exec(select(Course)).all(), [])

    def test_list_includes_certificate_templates(self):
        course_service.create_course(
            self.db, CourseCreate(title="Linked", certificate_templates=[self.excellence.id]), self.admin.id
        )
        course_service.create_course(self.db, CourseCreate(title="Plain"), self.admin.id)

        courses = {c.title: c for c in course_service.get_courses(self.db)}
        self.assertEqual(len(courses), 2)
        linked = courses["Linked"].course_certificates
        self.assertEqual(len(linked), 1)
        self.assertEqual(linked[0].certificate_template.name, "Excellence")
        self.assertEqual(courses["Plain"].course_certificates, [])

    def test_update_replaces_certificate_links_when_given(self):
        course = course_service.create_course(
            self.db, CourseCreate(title="Course", certificate_templates=[self.completion.id]), self.admin.id
        )
        course_service.update_course(
            self.db, course.id, CourseUpdate(certificate_templates=[self.excellence.id, self.completion.id])
        )
        self.assertEqual(
            {link.certificate_id for link in self.links(course.id)},
            {self.excellence.id, self.completion.id},
        )

        course_service.update_course(self.db, course.id, CourseUpdate(description="no link change"))
        self.assertEqual(len(self.links(course.id)), 2)

        course_service.update_course(self.db, course.id, CourseUpdate(certificate_templates=[]))
        self.assertEqual(self.links(course.id), [])

    def test_update_stamps_and_normalises(self):
        course = course_service.create_course(
            self.db, CourseCreate(title="Course", mentors=["Grace"]), self.admin.id
        )
        before = course.updated_at
        updated = course_service.update_course(self.db, course.id, CourseUpdate(title="Renamed", tags=None))
        self.assertEqual(updated.title, "Renamed")
        self.assertEqual(updated.slug, "course")
        self.assertEqual(updated.tags, [])
        self.assertEqual(updated.mentors, [])
        self.assertEqual(updated.created_by, self.admin.id)
        self.assertGreaterEqual(updated.updated_at, before)

    def test_get_update_delete_unknown(self):
        missing = uuid.uuid4()
        self.assertIsNone(course_service.get_course_by_id(self.db, missing))
        self.assertIsNone(course_service.update_course(self.db, missing, CourseUpdate(title="x")))
        self.assertFalse(course_service.delete_course(self.db, missing))

    def test_delete(self):
        course = course_service.create_course(self.db, CourseCreate(title="Gone"), self.admin.id)
        self.assertTrue(course_service.delete_course(self.db, course.id))
        self.assertIsNone(course_service.get_course_by_id(self.db, course.id))
