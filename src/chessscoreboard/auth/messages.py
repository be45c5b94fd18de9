"""Human-readable text for authentication error codes."""

# Chess Scoreboard
# Copyright (C) 2025  Chess Scoreboard developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from types import MappingProxyType
from typing import Optional

AUTH_ERROR_MESSAGES = MappingProxyType(
    {
        "auth/user-not-found": "No account found with this email.",
        "auth/wrong-password": "Incorrect password. Please try again.",
        "auth/invalid-email": "Please enter a valid email address.",
        "auth/email-already-in-use": "An account with this email already exists.",
        "auth/weak-password": "Password must be at least 6 characters.",
        "auth/too-many-requests": "Too many failed attempts. Please wait and try again.",
        "auth/network-request-failed": "Network error. Check your internet connection.",
        "auth/invalid-credential": "Invalid email or password. Please check and try again.",
    }
)


def friendly_auth_error(code: Optional[str]) -> str:
    """Map an authentication error code to a message for the user.

    Example:
        >>> friendly_auth_error("auth/weak-password")
        'Password must be at least 6 characters.'
        >>> friendly_auth_error("auth/quota-exceeded")
        'Authentication error: auth/quota-exceeded'
    """
    message = AUTH_ERROR_MESSAGES.get(code)
    if message is None:
        return f"Authentication error: {code}"
    return message
