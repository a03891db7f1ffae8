from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class EmailAlreadyExistsError(DomainError):
    """Ja existe conta com este email."""


class InvalidCredentialsError(DomainError):
    """Email desconhecido ou senha incorreta."""


class UserInactiveError(DomainError):
    """Conta autenticada, mas desativada."""


class InvalidTokenError(DomainError):
    """Refresh token invalido, expirado, revogado ou sem usuario ativo."""


class CredentialPolicyError(DomainError):
    """Credenciais rejeitadas pela politica de cadastro."""


class InvalidEmailError(CredentialPolicyError):
    """Email fora do formato local@dominio.tld."""


class WeakPasswordError(CredentialPolicyError):
    """Senha nao atende as regras de forca."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class InvalidRoleError(DomainError):
    """Papel fora do conjunto admin, user, moderator, guest."""
