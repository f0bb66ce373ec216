"""Email service implementations.

This package contains notification sink adapters:
- StubEmailService: Console logging for development/testing
- SESEmailService: AWS SES for production
"""

from rend_auth.infrastructure.email.ses_email_service import SESEmailService
from rend_auth.infrastructure.email.stub_email_service import StubEmailService

__all__ = ["SESEmailService", "StubEmailService"]
