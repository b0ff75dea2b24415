from .base import Base
from .movie import Movie
from .review import Review
from .user import User, UserRole, UserStatus
