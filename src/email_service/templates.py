from dataclasses import dataclass

_HEAD = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
"""

_FOOT = """
        <hr style="border: none; border-top: 1px solid #ddd; margin: 30px 0;">

        <p style="font-size: 12px; color: #888; text-align: center;">
            If you have any questions, please don't hesitate to contact us.
        </p>
    </body>
    </html>
"""


@dataclass
class EmailTemplates:
    INVITATION_SUBJECT = "You're invited: {event_name}"
    INVITATION_HTML = (
        _HEAD
        + """
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #d4a373;">You're Invited!</h1>
        </div>

        <p>Dear {guest_name},</p>

        <p>{couple_names} would love for you to join them.</p>

        <div style="background-color: #fefae0; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #bc6c25; margin-top: 0;">{event_name}</h2>
            <p><strong>Date:</strong> {event_date}</p>
            <p><strong>Location:</strong> {event_location}</p>
        </div>

        <p>Please let us know if you can attend by clicking the button below:</p>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{rsvp_url}" style="background-color: #d4a373; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                RSVP Now
            </a>
        </div>

        <p>If the button doesn't work, you can copy and paste the following link into your browser:</p>
        <p style="word-break: break-all; color: #606c38;"><a href="{rsvp_url}">{rsvp_url}</a></p>

        <p>With love,<br>{couple_names}</p>
"""
        + _FOOT
    )
    INVITATION_TEXT = """
    Dear {guest_name},

    {couple_names} would love for you to join them.

    {event_name}
    - Date: {event_date}
    - Location: {event_location}

    Please let us know if you can attend by visiting:
    {rsvp_url}

    With love,
    {couple_names}
    """

    REMINDER_SUBJECT = "RSVP Reminder: {couple_names}'s Wedding"
    REMINDER_HTML = (
        _HEAD
        + """
        <p>Dear {guest_name},</p>

        <p>We haven't heard back from you yet for:</p>

        <ul>{pending_events}</ul>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{rsvp_url}" style="background-color: #d4a373; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                RSVP Now
            </a>
        </div>

        <p>With love,<br>{couple_names}</p>
"""
        + _FOOT
    )
    REMINDER_TEXT = """
    Dear {guest_name},

    We haven't heard back from you yet for:
{pending_events}

    Please respond at:
    {rsvp_url}

    With love,
    {couple_names}
    """

    BROADCAST_HTML = (
        _HEAD
        + """
        <p>Dear {guest_name},</p>

        <p>{content}</p>
{cta}
        <p>With love,<br>{couple_names}</p>
"""
        + _FOOT
    )
    BROADCAST_CTA_HTML = """
        <div style="text-align: center; margin: 30px 0;">
            <a href="{cta_url}" style="background-color: #d4a373; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                {cta_text}
            </a>
        </div>
"""
    BROADCAST_TEXT = """
    Dear {guest_name},

{content}
{cta}
    With love,
    {couple_names}
    """
