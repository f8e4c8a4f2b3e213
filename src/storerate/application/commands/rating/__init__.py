"""Rating commands."""

from storerate.application.commands.rating.delete_rating_command import (
    DeleteRatingCommand,
)
from storerate.application.commands.rating.submit_rating_command import (
    SubmitRatingCommand,
)

__all__ = [
    "DeleteRatingCommand",
    "SubmitRatingCommand",
]
