from .user import User, UserRole
from .suggestion import Suggestion, SuggestionStatus
from .comment import Comment
