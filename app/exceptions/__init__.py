from .auth import (
    ExpiredTokenException,
    InvalidCredentialsException,
    InvalidTokenException,
    TokenMissingException,
)
from .base import AppHTTPException
from .movie import MovieSaveException, MovieSearchException, MovieSearchQueryMissingException
from .review import ReviewCreationException, ReviewFetchException
from .user import UserAlreadyExistsException, UserCreationException, UserNotFoundException
