from io import StringIO

from django.core.management import call_command

from core.changelog import run_changelogs
from core.exceptions import CurrencyNotFoundException
from core.services.currency_service import CurrencyService
from tests.base import MongoTestCase


class ChangelogTests(MongoTestCase):
    def test_seeds_reference_data_once(self) -> None:
        first = run_changelogs()
        second = run_changelogs()

        self.assertEqual(first, {'currencies': 8, 'default_categories': 5})
        self.assertEqual(second, {'currencies': 0, 'default_categories': 0})
        self.assertEqual(self.db.currencies.count_documents({}), 8)
        self.assertEqual(self.db.default_categories.count_documents({'is_active': True}), 5)

    def test_management_command(self) -> None:
        out = StringIO()

        call_command('seed_reference_data', stdout=out)

        self.assertIn('currencies: 8 inserted', out.getvalue())
        self.assertIn('Reference data is up to date', out.getvalue())


class CurrencyServiceTests(MongoTestCase):
    def setUp(self):
        super().setUp()
        run_changelogs()
        self.service = CurrencyService()

    def test_only_active_currencies_are_listed(self) -> None:
        currencies = self.service.list_active_currencies()

        self.assertEqual([(c['code'], c['symbol'], c['isActive']) for c in currencies], [('INR', '₹', True)])

    def test_lookup_by_code_is_case_insensitive(self) -> None:
        self.assertEqual(self.service.get_by_code('eur')['name'], 'Euro')

    def test_unknown_code(self) -> None:
        with self.assertRaises(CurrencyNotFoundException):
            self.service.get_by_code('XYZ')
