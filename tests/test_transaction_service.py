from datetime import date, datetime
from decimal import Decimal

from bson import ObjectId

from core.exceptions import UserNotFoundException
from finance.exceptions import TransactionNotFoundException, TransactionValidationException
from finance.services.transaction_service import TransactionService
from tests.base import MongoTestCase


def transaction(amount, transaction_type='EXPENSE', when=datetime(2024, 5, 10),
                category='Groceries', description='Weekly shopping'):
    return {
        'amount': amount,
        'description': description,
        'category': category,
        'date': when,
        'transactionType': transaction_type,
    }


class TransactionServiceTests(MongoTestCase):
    def setUp(self):
        super().setUp()
        self.user = self.create_user()
        self.user_id = self.user['_id']
        self.service = TransactionService()

    def test_create_attaches_owner(self) -> None:
        created = self.service.create_transaction(transaction(Decimal('45.50')), self.user_id)

        self.assertEqual(created['amount'], 45.5)
        self.assertEqual(created['transactionType'], 'EXPENSE')
        self.assertEqual(created['user']['id'], self.user_id)
        self.assertEqual(created['user']['phoneNumber'], '9876543210')
        self.assertEqual(self.db.financial_transactions.find_one()['user_id'], self.user_id)

    def test_create_for_unknown_user_fails(self) -> None:
        with self.assertRaises(UserNotFoundException):
            self.service.create_transaction(transaction(10), 'nobody')

    def test_create_rejects_broken_business_rules(self) -> None:
        for data in (transaction(0), transaction(-5), transaction(10, transaction_type='REFUND'),
                     transaction(10, category='  '), transaction('abc')):
            with self.assertRaises(TransactionValidationException):
                self.service.create_transaction(data, self.user_id)

    def test_get_is_scoped_to_owner(self) -> None:
        created = self.service.create_transaction(transaction(10), self.user_id)
        other = self.create_user(phone_number='9000000000')

        self.assertEqual(self.service.get_transaction(created['id'], self.user_id)['id'], created['id'])
        for transaction_id, user_id in ((created['id'], other['_id']),
                                        (str(ObjectId()), self.user_id),
                                        ('not-an-id', self.user_id)):
            with self.assertRaises(TransactionNotFoundException):
                self.service.get_transaction(transaction_id, user_id)

    def test_update_replaces_every_field(self) -> None:
        created = self.service.create_transaction(transaction(10), self.user_id)

        self.service.update_transaction(created['id'], {
            'amount': Decimal('2500.00'),
            'description': None,
            'category': 'Salary',
            'date': '2024-04-30T09:15:00',
            'transactionType': 'INCOME',
        }, self.user_id)
        reread = self.service.get_transaction(created['id'], self.user_id)

        self.assertEqual(reread['amount'], 2500.0)
        self.assertIsNone(reread['description'])
        self.assertEqual(reread['category'], 'Salary')
        self.assertEqual(reread['date'], datetime(2024, 4, 30, 9, 15))
        self.assertEqual(reread['transactionType'], 'INCOME')

    def test_update_of_foreign_transaction_is_not_found(self) -> None:
        created = self.service.create_transaction(transaction(10), self.user_id)
        other = self.create_user(phone_number='9000000000')

        with self.assertRaises(TransactionNotFoundException):
            self.service.update_transaction(created['id'], transaction(99), other['_id'])

        self.assertEqual(self.service.get_transaction(created['id'], self.user_id)['amount'], 10.0)

    def test_delete_returns_final_state_and_removes_it(self) -> None:
        created = self.service.create_transaction(transaction(Decimal('12.30')), self.user_id)

        deleted = self.service.delete_transaction(created['id'], self.user_id)

        self.assertEqual(deleted['id'], created['id'])
        self.assertEqual(deleted['amount'], 12.3)
        self.assertEqual(deleted['category'], 'Groceries')
        with self.assertRaises(TransactionNotFoundException):
            self.service.get_transaction(created['id'], self.user_id)
        with self.assertRaises(TransactionNotFoundException):
            self.service.delete_transaction(created['id'], self.user_id)

    def test_list_is_sorted_by_date_descending_and_paginated(self) -> None:
        for day in (3, 17, 9):
            self.service.create_transaction(transaction(day, when=datetime(2024, 5, day)), self.user_id)

        first = self.service.list_transactions(self.user_id, 0, 2)
        second = self.service.list_transactions(self.user_id, 1, 2)

        self.assertEqual([t['amount'] for t in first['content']], [17.0, 9.0])
        self.assertEqual([t['amount'] for t in second['content']], [3.0])
        self.assertEqual(first['totalElements'], 3)
        self.assertEqual(first['totalPages'], 2)
        self.assertTrue(second['last'])

    def test_totals_by_type(self) -> None:
        self.service.create_transaction(transaction(1000, 'INCOME'), self.user_id)
        self.service.create_transaction(transaction(Decimal('250.25')), self.user_id)
        self.service.create_transaction(transaction(Decimal('49.75')), self.user_id)

        self.assertEqual(self.service.get_total_income(self.user_id), 1000.0)
        self.assertEqual(self.service.get_total_expense(self.user_id), 300.0)
        self.assertEqual(self.service.get_total_amount(self.user_id), 1300.0)

    def test_totals_without_transactions_are_zero(self) -> None:
        self.assertEqual(self.service.get_total_income(self.user_id), 0)
        self.assertEqual(self.service.get_total_expense(self.user_id), 0)

    def test_month_expense_window_is_inclusive(self) -> None:
        self.service.create_transaction(transaction(1, when=datetime(2024, 4, 30, 23, 59, 59)), self.user_id)
        self.service.create_transaction(transaction(10, when=datetime(2024, 5, 1, 0, 0, 0)), self.user_id)
        self.service.create_transaction(transaction(20, when=datetime(2024, 5, 31, 23, 59, 59)), self.user_id)
        self.service.create_transaction(transaction(40, 'INCOME', when=datetime(2024, 5, 15)), self.user_id)
        self.service.create_transaction(transaction(80, when=datetime(2024, 6, 1)), self.user_id)

        self.assertEqual(self.service.get_total_expense_for_month(self.user_id, 2024, 5), 30.0)
        self.assertEqual(self.service.get_total_expense_for_month(self.user_id, 2024, 4), 1.0)

    def test_current_month_transactions(self) -> None:
        self.service.create_transaction(transaction(1, when=datetime(2024, 5, 2)), self.user_id)
        self.service.create_transaction(transaction(2, when=datetime(2024, 5, 20)), self.user_id)
        self.service.create_transaction(transaction(3, when=datetime(2024, 4, 28)), self.user_id)

        page = self.service.get_current_month_transactions(self.user_id, 0, 10, today=date(2024, 5, 21))
        beyond = self.service.get_current_month_transactions(self.user_id, 3, 10, today=date(2024, 5, 21))

        self.assertEqual([t['amount'] for t in page['content']], [2.0, 1.0])
        self.assertEqual(beyond['content'], [])
        self.assertEqual(beyond['totalElements'], 2)

    def test_recent_transactions(self) -> None:
        for day in range(1, 8):
            self.service.create_transaction(transaction(day, when=datetime(2024, 5, day)), self.user_id)

        recent = self.service.get_recent_transactions(self.user_id, limit=3)

        self.assertEqual([t['amount'] for t in recent], [7.0, 6.0, 5.0])

    def test_every_operation_checks_the_user_first(self) -> None:
        transaction_id = self.service.create_transaction(transaction(10), self.user_id)['id']
        operations = [
            lambda: self.service.get_transaction(transaction_id, 'nobody'),
            lambda: self.service.update_transaction(transaction_id, transaction(20), 'nobody'),
            lambda: self.service.delete_transaction(transaction_id, 'nobody'),
            lambda: self.service.list_transactions('nobody', 0, 10),
            lambda: self.service.list_all_transactions('nobody'),
            lambda: self.service.get_recent_transactions('nobody'),
            lambda: self.service.get_total_income('nobody'),
            lambda: self.service.get_total_expense('nobody'),
            lambda: self.service.get_total_amount('nobody'),
            lambda: self.service.get_total_expense_for_month('nobody', 2024, 5),
            lambda: self.service.get_current_month_transactions('nobody', 0, 10, today=date(2024, 5, 21)),
        ]

        for operation in operations:
            with self.assertRaises(UserNotFoundException):
                operation()

        self.assertEqual(self.db.financial_transactions.count_documents({}), 1)
