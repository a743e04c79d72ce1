"""Register user use case."""

from pydantic import BaseModel

from nnntp.application.usecase.base import BaseUseCase
from nnntp.domain.service import AuthService


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str
    password: str


class RegisterUserResponse(BaseModel):
    """Register user response."""

    username: str


class RegisterUserUseCase(BaseUseCase[RegisterUserRequest, RegisterUserResponse]):
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register user use case.

        Args:
            auth_service: Auth domain service
        """
        self.auth_service = auth_service

    def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration.

        Raises:
            DuplicateUserError: If the username is taken
        """
        user = self.auth_service.register(request.username, request.password)
        return RegisterUserResponse(username=user.username)
