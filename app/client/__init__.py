"""
Client-side helpers for the landing page: contact form and locale switcher.
"""
from .contact_form import ContactFormController, FormStatus
from .language_switcher import LanguageSwitcher

__all__ = ["ContactFormController", "FormStatus", "LanguageSwitcher"]
