import mongomock
from django.test import SimpleTestCase

from core.database import set_database
from core.models.user_model import UserModel
from core.repositories.user_repository import UserRepository


class MongoTestCase(SimpleTestCase):
    """Runs each test against a fresh in-memory MongoDB."""

    def setUp(self):
        super().setUp()
        self.db = mongomock.MongoClient().finance_tracker_test
        set_database(self.db)

    def tearDown(self):
        self.db.client.drop_database(self.db.name)
        set_database(None)
        super().tearDown()

    def create_user(self, phone_number='9876543210', **kwargs):
        return UserRepository().create(UserModel.create_user_data(phone_number=phone_number, **kwargs))
