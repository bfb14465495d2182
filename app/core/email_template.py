"""
Notification e-mail for contact form submissions.
All submitter-provided values are HTML-escaped before rendering.
"""
from dataclasses import dataclass
from html import escape

from app.config import SITE_NAME
from app.models.contact import ContactSubmission

PRIMARY_COLOR = "#1a365d"
ACCENT_COLOR = "#f6e05e"


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str
    text: str


def build_subject(submission: ContactSubmission) -> str:
    # Subjects are single-line
    name = " ".join(submission.name.split())
    return f"New Contact Form Submission from {name}"


def _field_row(label: str, value: str) -> str:
    return f'<p style="margin: 10px 0;"><strong>{label}:</strong> {escape(value)}</p>'


def build_html(submission: ContactSubmission) -> str:
    rows = [
        _field_row("Name", submission.name),
        _field_row("Email", submission.email),
    ]
    if submission.phone:
        rows.append(_field_row("Phone", submission.phone))

    details = "\n    ".join(rows)
    return f"""<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: {PRIMARY_COLOR}; border-bottom: 2px solid {ACCENT_COLOR}; padding-bottom: 10px;">
    New Contact Form Submission
  </h2>
  <div style="margin: 20px 0;">
    {details}
  </div>
  <div style="background-color: #f7fafc; padding: 20px; border-left: 4px solid {ACCENT_COLOR}; margin: 20px 0;">
    <h3 style="margin-top: 0; color: {PRIMARY_COLOR};">Message:</h3>
    <p style="white-space: pre-wrap; color: #4a5568;">{escape(submission.message)}</p>
  </div>
  <hr style="border: none; border-top: 1px solid #e2e8f0; margin: 20px 0;" />
  <p style="color: #718096; font-size: 12px;">
    This email was sent from the {escape(SITE_NAME)} website contact form.
  </p>
</div>"""


def build_text(submission: ContactSubmission) -> str:
    lines = [
        "New Contact Form Submission",
        "",
        f"Name: {submission.name}",
        f"Email: {submission.email}",
    ]
    if submission.phone:
        lines.append(f"Phone: {submission.phone}")
    lines += [
        "",
        "Message:",
        submission.message,
        "",
        "--",
        f"This email was sent from the {SITE_NAME} website contact form.",
    ]
    return "\n".join(lines)


def render_contact_email(submission: ContactSubmission) -> RenderedEmail:
    return RenderedEmail(
        subject=build_subject(submission),
        html=build_html(submission),
        text=build_text(submission),
    )
