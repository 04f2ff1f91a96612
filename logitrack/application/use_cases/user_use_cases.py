# logitrack/application/use_cases/user_use_cases.py

"""
Casos de uso de usuários: cadastro, login, perfil e administração.
"""

from typing import List

from logitrack.adapters.outbound.security.auth_user_manager import UserAuthManager
from logitrack.application.dtos import TokenData, UserCreate, UserOutput, UserSelfUpdate
from logitrack.application.ports.inbound import IUserUseCase
from logitrack.application.use_cases.base_use_cases import BaseUseCase
from logitrack.domain.exceptions import (
    InvalidCredentialsException,
    InvalidInputException,
    ResourceAlreadyExistsException,
    ResourceInactiveException,
    ResourceNotFoundException,
)
from logitrack.domain.models import Actor, User, UserRole, UserStatus


def to_user_output(user: User) -> UserOutput:
    return UserOutput.model_validate(user.model_dump(exclude={"password"}))


class UserUseCases(BaseUseCase, IUserUseCase):
    """
    Regras de negócio relacionadas a usuários.
    """

    async def _find_by_email(self, email: str):
        email = email.strip().lower()
        return next((u for u in await self.adapter.get_users() if u.email.lower() == email), None)

    async def get_user(self, user_id: str) -> User:
        user = next((u for u in await self.adapter.get_users() if u.id == user_id), None)
        if user is None:
            raise ResourceNotFoundException(detail="Usuário não encontrado", resource_id=user_id)
        return user

    async def register_user(self, user_data: UserCreate) -> UserOutput:
        """
        Cadastra um novo usuário com papel USER e status ACTIVE.

        Raises:
            ResourceAlreadyExistsException: Se o email já estiver em uso
        """
        if await self._find_by_email(user_data.email) is not None:
            self.logger.warning(f"Attempt to register duplicate email: {user_data.email}")
            raise ResourceAlreadyExistsException(detail=f"User with email '{user_data.email}' already exists")

        user = User(
            id=self.id_factory(),
            name=user_data.name,
            email=user_data.email.lower(),
            password=await UserAuthManager.hash_password(user_data.password),
            phone=user_data.phone,
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
        )
        await self.adapter.save_user(user)
        return to_user_output(user)

    async def authenticate_user(self, email: str, password: str) -> TokenData:
        """
        Autentica pelo email e senha e devolve um token de acesso.

        Raises:
            InvalidCredentialsException: Email ou senha incorretos
            ResourceInactiveException: Usuário bloqueado
        """
        user = await self._find_by_email(email)
        if user is None or not await UserAuthManager.verify_password(password, user.password):
            self.logger.warning(f"Failed login attempt for: {email}")
            raise InvalidCredentialsException(detail="Email ou senha inválidos")

        if user.is_blocked:
            self.logger.warning(f"Login attempt with blocked user: {email}")
            raise ResourceInactiveException(detail="Acesso bloqueado. Contate o administrador.", resource_id=user.id)

        token = await UserAuthManager.create_access_token(subject=user.id)
        self.logger.info(f"Successful login: {user.email}")
        return TokenData(access_token=token, user=to_user_output(user))

    async def update_profile(self, user_id: str, data: UserSelfUpdate) -> UserOutput:
        user = await self.get_user(user_id)
        changes = data.to_payload()
        if "password" in changes:
            changes["password"] = await UserAuthManager.hash_password(changes["password"])

        updated = user.model_copy(update=changes)
        await self.adapter.update_user(updated)
        return to_user_output(updated)

    async def list_users(self) -> List[UserOutput]:
        users = await self._resilient_list(self.adapter.get_users, "users")
        return [to_user_output(u) for u in sorted(users, key=lambda u: u.name.lower())]

    def _check_not_self(self, actor: Actor, user_id: str) -> None:
        if actor.id == user_id:
            raise InvalidInputException(
                detail="Não é possível alterar o próprio acesso",
                fields={"userId": "próprio usuário"},
            )

    async def toggle_role(self, actor: Actor, user_id: str) -> UserOutput:
        self._check_not_self(actor, user_id)
        user = await self.get_user(user_id)
        role = UserRole.USER if user.is_admin else UserRole.ADMIN
        updated = user.model_copy(update={"role": role})
        await self.adapter.update_user(updated)
        self.logger.info(f"User {user_id} role changed to {role.value} by {actor.name}")
        return to_user_output(updated)

    async def toggle_status(self, actor: Actor, user_id: str) -> UserOutput:
        self._check_not_self(actor, user_id)
        user = await self.get_user(user_id)
        status = UserStatus.ACTIVE if user.is_blocked else UserStatus.BLOCKED
        updated = user.model_copy(update={"status": status})
        await self.adapter.update_user(updated)
        self.logger.info(f"User {user_id} status changed to {status.value} by {actor.name}")
        return to_user_output(updated)

    async def seed_admin(self, name: str, email: str, password: str) -> bool:
        """
        Cria o administrador inicial quando ainda não há usuários.

        Returns:
            True se o administrador foi criado
        """
        if await self.adapter.get_users():
            return False

        admin = User(
            id=self.id_factory(),
            name=name,
            email=email.lower(),
            password=await UserAuthManager.hash_password(password),
            role=UserRole.ADMIN,
            status=UserStatus.ACTIVE,
        )
        await self.adapter.save_user(admin)
        self.logger.info(f"Initial administrator created: {admin.email}")
        return True
