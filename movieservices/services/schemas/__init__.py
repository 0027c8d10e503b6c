from movieservices.services.schemas.movie_info import (
    MovieInfoRead,
    MovieInfoCreate,
    MovieInfoUpdate,
)
from movieservices.services.schemas.review import (
    ReviewRead,
    ReviewCreate,
    ReviewUpdate,
)

__all__ = [
    "MovieInfoRead",
    "MovieInfoCreate",
    "MovieInfoUpdate",
    "ReviewRead",
    "ReviewCreate",
    "ReviewUpdate",
]
