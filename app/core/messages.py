"""Сообщения об ошибках, которые видит клиент."""

# Общие
REQUIRED = "{field} is required"
INVALID_REQUEST = "Invalid request body"
SOMETHING_WENT_WRONG = "Something went wrong"

# Пользователь
NAME_REQUIRED = REQUIRED.format(field="Name")
INVALID_EMAIL = "Invalid email address format"
DUPLICATE_EMAIL = "This email is already in use"
PASSWORD_REQUIRED = REQUIRED.format(field="Password")
PASSWORD_MIN_LENGTH = "Password must be at least 8 characters long"
PASSWORD_MAX_LENGTH = "Password must be at most 72 characters long"
PASSWORD_ALPHANUMERIC = "Password must contain only letters and digits"
INVALID_CREDENTIALS = "Invalid credentials"

# Токены
TOKEN_REQUIRED = "Authentication token required"
TOKEN_INVALID = "Invalid or expired token"

# Фильмы
SEARCH_QUERY_REQUIRED = REQUIRED.format(field="Search query")
MOVIE_SEARCH_FAILED = "Failed to fetch movies from the metadata service"
MOVIE_SAVE_FAILED = "Failed to save movie"

# Отзывы
MOVIE_ID_REQUIRED = REQUIRED.format(field="Movie ID")
RATING_NUMBER = "Rating must be an integer"
RATING_RANGE = "Rating must be between 1 and 5"
REVIEW_MAX_LENGTH = "Comment must be at most 1000 characters long"
REVIEW_COMMENT_REQUIRED = "Either a general comment or a spoiler comment is required"
REVIEW_CREATE_FAILED = "Failed to create review"
REVIEW_FETCH_FAILED = "Failed to fetch reviews"
