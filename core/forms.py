"""
Request validation for the core endpoints.

Location: core/forms.py

Forms are bound to the decoded JSON body; views raise
RequestValidationException.from_form(form) when they are invalid.
"""
from django import forms
from django.core.validators import RegexValidator


class LoginForm(forms.Form):
    phoneNumber = forms.CharField(
        validators=[RegexValidator(r'^\d{10}$', "Phone number must be 10 digits")],
        error_messages={'required': "Phone number is required"},
    )


class GoogleLoginForm(forms.Form):
    idToken = forms.CharField(error_messages={'required': "ID token is required"})


class UserProfileForm(forms.Form):
    name = forms.CharField(max_length=100, required=False)
    email = forms.EmailField(required=False)
    address = forms.CharField(max_length=255, required=False)
    currency = forms.CharField(required=False)

    def clean_currency(self):
        # Only an absent or null currency means "no change requested"
        if self.data.get('currency') is None:
            return None
        return self.cleaned_data.get('currency', '')

    def clean_email(self):
        return self.cleaned_data.get('email') or None
