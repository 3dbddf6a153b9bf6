"""
Decorators of the core app.

Location: core/decorators/
"""
from .api import api_view
