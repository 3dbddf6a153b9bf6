"""
Request validation for the finance endpoints.

Location: finance/forms.py
"""
from decimal import Decimal

from dateutil import parser as date_parser
from django import forms
from django.core.validators import RegexValidator

from finance.models.category_model import CategoryModel
from finance.models.transaction_model import TransactionModel


class CategoryForm(forms.Form):
    name = forms.CharField(
        max_length=CategoryModel.NAME_MAX_LENGTH,
        validators=[RegexValidator(CategoryModel.NAME_PATTERN,
                                   "Category name must contain only alphanumeric characters and spaces")],
        error_messages={'required': "Category name is required"},
    )


class FlexibleDateTimeField(forms.Field):
    """Accepts any date or datetime string python-dateutil can parse."""

    default_error_messages = {
        'invalid': "Enter a valid date.",
    }

    def to_python(self, value):
        if value in self.empty_values:
            return None
        try:
            return date_parser.parse(str(value))
        except (ValueError, OverflowError):
            raise forms.ValidationError(self.error_messages['invalid'], code='invalid')


class TransactionForm(forms.Form):
    """
    Full transaction body. Every field but description is mandatory, on
    create and on update alike.
    """

    amount = forms.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'required': "Amount is required"},
    )
    description = forms.CharField(max_length=TransactionModel.DESCRIPTION_MAX_LENGTH, required=False)
    category = forms.CharField(
        max_length=TransactionModel.CATEGORY_MAX_LENGTH,
        error_messages={'required': "Category is required"},
    )
    date = FlexibleDateTimeField(error_messages={'required': "Date is required"})
    transactionType = forms.ChoiceField(
        choices=[(t, t) for t in TransactionModel.TYPES],
        error_messages={'required': "Transaction type is required"},
    )


class CreateTransactionForm(TransactionForm):
    userId = forms.CharField(error_messages={'required': "User ID is required"})


class PageForm(forms.Form):
    """page/size query parameters."""

    page = forms.IntegerField(min_value=0, required=False)
    size = forms.IntegerField(min_value=1, required=False)

    DEFAULT_PAGE = 0
    DEFAULT_SIZE = 10

    def clean_page(self):
        page = self.cleaned_data.get('page')
        return self.DEFAULT_PAGE if page is None else page

    def clean_size(self):
        size = self.cleaned_data.get('size')
        return self.DEFAULT_SIZE if size is None else size
