"""Mentor chat service module"""
from .mentor_service import MentorService, MentorChatError, FALLBACK_REPLY

__all__ = [
    "MentorService",
    "MentorChatError",
    "FALLBACK_REPLY",
]
