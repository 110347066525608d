import unittest
import uuid

from certifytrack.errors import NotAuthenticatedError
from certifytrack.schemas.certificate_template_schema import CertificateTemplateCreate, CertificateTemplateUpdate
from certifytrack.services import certificate_template_service
from tests.db_utils import add_user, make_session


class TestCertificateTemplateService(unittest.TestCase):

    def setUp(self):
        self.db = make_session()
        self.admin = add_user(self.db)

    def tearDown(self):
        self.db.close()

    def test_create_stamps_creator(self):
        template = certificate_template_service.create_certificate_template(
            self.db,
            CertificateTemplateCreate(name="Completion", template_json={"fields": ["name"]}, template_html="<h1/>"),
            self.admin.id,
        )
        self.assertEqual(template.created_by, self.admin.id)
        self.assertEqual(template.template_json, {"fields": ["name"]})

    def test_create_without_identity_is_aborted(self):
        with self.assertRaises(NotAuthenticatedError):
            certificate_template_service.create_certificate_template(
                self.db, CertificateTemplateCreate(name="x"), None
            )
        self.assertEqual(certificate_template_service.get_certificate_templates(self.db), [])

    def test_update_get_delete(self):
        template = certificate_template_service.create_certificate_template(
            self.db, CertificateTemplateCreate(name="Draft"), self.admin.id
        )
        updated = certificate_template_service.update_certificate_template(
            self.db, template.id, CertificateTemplateUpdate(name="Final", preview_url="https://x/p.png")
        )
        self.assertEqual(updated.name, "Final")
        self.assertEqual(updated.created_by, self.admin.id)
        self.assertEqual(certificate_template_service.get_certificate_template(self.db, template.id).name, "Final")
        self.assertIsNone(certificate_template_service.update_certificate_template(
            self.db, uuid.uuid4(), CertificateTemplateUpdate(name="x")))

        self.assertTrue(certificate_template_service.delete_certificate_template(self.db, template.id))
        self.assertIsNone(certificate_template_service.get_certificate_template(self.db, template.id))
