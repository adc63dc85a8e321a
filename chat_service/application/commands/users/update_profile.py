"""Update Profile Command."""

from dataclasses import dataclass
from chat_service.application.common.interfaces import Command, CommandHandler
from chat_service.domain.entities.user import User
from chat_service.domain.ports.repositories import UserRepository
from chat_service.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class UpdateProfileCommand(Command[User]):
    # Always the authenticated caller; never taken from the request body
    user_id: UserId
    name: str
    profile_picture_url: str


class UpdateProfileHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateProfileCommand) -> User:
        return await self._user_repository.update_profile(
            command.user_id, command.name, command.profile_picture_url
        )
