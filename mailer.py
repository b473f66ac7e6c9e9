import logging
import smtplib
from email.mime.text import MIMEText

from config import EMAIL_SUBJECT, SMTP_HOST, SMTP_PORT
from errors import EmailSendError

logger = logging.getLogger(__name__)


def build_message(email_from, email_to, body, subject=EMAIL_SUBJECT):
    msg = MIMEText(body, "plain", "utf-8")
    msg["From"] = email_from
    msg["To"] = email_to
    msg["Subject"] = subject
    return msg


def send_email(email_from, email_to, password, body, subject=EMAIL_SUBJECT,
               host=SMTP_HOST, port=SMTP_PORT):
    msg = build_message(email_from, email_to, body, subject)
    try:
        logger.info("📧 Sending email...")
        with smtplib.SMTP(host, port) as server:
            server.starttls()
            server.login(email_from, password)
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise EmailSendError(f"Could not send email: {e}") from e
    logger.info("✅ Email sent.")
