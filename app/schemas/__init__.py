from .user import UserCreate, UserLogin, UserOut, RegisterResponse, CurrentUser
from .tokens import Token
from .suggestion import SuggestionOut, SuggestionListItem, SuggestionDetail, StatusUpdate, StatusUpdateResponse, StatusCount, DepartmentCount, TrendPoint, SuggestionAnalytics
from .comment import CommentCreate, CommentOut
