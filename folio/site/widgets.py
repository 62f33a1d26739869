"""Third-party embeds, passed through as opaque markup."""

from __future__ import annotations

from html import escape

from ..config import SUBSCRIBE_ACTION_BASE, SUBSCRIBE_SCRIPT_URL


def subscription_form(form_id: str | None) -> str:
    """Newsletter script and signup form. Returns "" when no form is configured."""
    if not form_id:
        return ""
    fid = escape(str(form_id), quote=True)
    return "\n".join(
        [
            f'<script src="{SUBSCRIBE_SCRIPT_URL}"></script>',
            f'<form class="subscribe" action="{SUBSCRIBE_ACTION_BASE}/{fid}/subscriptions"'
            f' method="post" target="_self" data-sv-form="{fid}">',
            "<div><strong>I've got more coming...</strong></div>",
            "<div>Subscribe to get my latest content by email.</div>",
            '<input type="text" name="fields[first_name]" placeholder="Your first name"'
            ' aria-label="Your first name" id="ck-first-name">',
            '<input type="email" name="email_address" placeholder="Your email address"'
            ' aria-label="Your email address" id="ck-email">',
            '<button type="submit">Subscribe</button>',
            '<div class="muted">I won’t send you spam. Unsubscribe at any time.</div>',
            "</form>",
        ]
    )
