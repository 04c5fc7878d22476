"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict
from flask import has_request_context, request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        if not has_request_context():
            return {'user_ip': 'system', 'session_id': None}
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None  # Sessions are identified by game_id instead
    }


def ordinalise(n: int) -> str:
    """Render a positive integer as an English ordinal ("1st", "12th", "23rd")."""
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f"{n}{suffix}"
