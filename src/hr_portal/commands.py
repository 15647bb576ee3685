"""Form submissions as typed commands.

Controllers build one of these values from the request and hand it to
``CommandDispatcher.dispatch``; views never touch the services directly for
writes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import singledispatchmethod
from typing import Any, Optional, Tuple

from .accounts.service import AccountService
from .auth.session import AuthSession
from .core.enums import Role
from .core.exceptions import AuthError, ValidationError
from .database.connection import SnapshotConnection
from .departments.service import DepartmentService
from .employees.service import EmployeeService
from .requests.service import RawItem, RequestService
from .routing.router import Route

logger = logging.getLogger(__name__)

SAVE_FAILED_WARNING = "Failed to save data"


@dataclass(frozen=True)
class RegisterAccount:
    first_name: str
    last_name: str
    email: str
    password: str


@dataclass(frozen=True)
class VerifyEmail:
    pass


@dataclass(frozen=True)
class SignIn:
    email: str
    password: str


@dataclass(frozen=True)
class SignOut:
    pass


@dataclass(frozen=True)
class UpdateProfile:
    first_name: str
    last_name: str


@dataclass(frozen=True)
class SaveEmployee:
    employee_code: str
    email: str
    position: str
    dept_id: str
    hire_date: str = ""
    employee_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteEmployee:
    employee_id: str


@dataclass(frozen=True)
class SaveDepartment:
    name: str
    description: str = ""
    dept_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteDepartment:
    dept_id: str


@dataclass(frozen=True)
class SaveAccount:
    first_name: str
    last_name: str
    email: str
    password: str
    role: str
    verified: bool = False
    account_id: Optional[str] = None


@dataclass(frozen=True)
class ResetPassword:
    account_id: str
    new_password: str


@dataclass(frozen=True)
class DeleteAccount:
    account_id: str


@dataclass(frozen=True)
class SubmitRequest:
    request_type: str
    items: Tuple[RawItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CommandResult:
    value: Any = None
    message: str = ""
    redirect_to: Optional[Route] = None
    warning: Optional[str] = None


class CommandDispatcher:
    """Runs commands against the services and reports storage failures.

    Domain errors propagate to the caller unchanged; a failed save is not an
    error for the command, it comes back as ``CommandResult.warning``.
    """

    def __init__(
        self,
        *,
        conn: SnapshotConnection,
        session: AuthSession,
        accounts: AccountService,
        departments: DepartmentService,
        employees: EmployeeService,
        requests: RequestService,
    ):
        self._conn = conn
        self._session = session
        self._accounts = accounts
        self._departments = departments
        self._employees = employees
        self._requests = requests

    def dispatch(self, command: Any) -> CommandResult:
        result = self._handle(command)
        error = self._conn.take_error()
        if error is not None:
            logger.warning("%s applied in memory only: %s", type(command).__name__, error)
            result = replace(result, warning=SAVE_FAILED_WARNING)
        return result

    def _require_account(self):
        account = self._session.current
        if account is None:
            raise AuthError("Please sign in to continue")
        return account

    @singledispatchmethod
    def _handle(self, command: Any) -> CommandResult:
        raise TypeError(f"Unsupported command: {type(command).__name__}")

    @_handle.register
    def _(self, command: RegisterAccount) -> CommandResult:
        account = self._accounts.register(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            password=command.password,
        )
        return CommandResult(account, "Account created! Please verify your email.", Route.VERIFY_EMAIL)

    @_handle.register
    def _(self, command: VerifyEmail) -> CommandResult:
        account = self._accounts.verify_pending_email()
        return CommandResult(account, "Email verified! You may now log in.", Route.LOGIN)

    @_handle.register
    def _(self, command: SignIn) -> CommandResult:
        account = self._session.sign_in(command.email, command.password)
        return CommandResult(account, "Login successful!", Route.PROFILE)

    @_handle.register
    def _(self, command: SignOut) -> CommandResult:
        self._session.sign_out()
        return CommandResult(None, "Logged out successfully", Route.HOME)

    @_handle.register
    def _(self, command: UpdateProfile) -> CommandResult:
        account = self._require_account()
        updated = self._accounts.update_profile(
            account_id=account.account_id,
            first_name=command.first_name,
            last_name=command.last_name,
        )
        return CommandResult(updated, "Profile updated", Route.PROFILE)

    @_handle.register
    def _(self, command: SaveEmployee) -> CommandResult:
        fields = dict(
            employee_code=command.employee_code,
            email=command.email,
            position=command.position,
            dept_id=command.dept_id,
            hire_date=command.hire_date,
        )
        if command.employee_id:
            employee = self._employees.update(employee_id=command.employee_id, **fields)
            return CommandResult(employee, "Employee updated", Route.EMPLOYEES)
        employee = self._employees.create(**fields)
        return CommandResult(employee, "Employee added", Route.EMPLOYEES)

    @_handle.register
    def _(self, command: DeleteEmployee) -> CommandResult:
        self._employees.delete(command.employee_id)
        return CommandResult(None, "Employee deleted", Route.EMPLOYEES)

    @_handle.register
    def _(self, command: SaveDepartment) -> CommandResult:
        if command.dept_id:
            dept = self._departments.update(dept_id=command.dept_id, name=command.name, description=command.description)
            return CommandResult(dept, "Department updated", Route.DEPARTMENTS)
        dept = self._departments.create(name=command.name, description=command.description)
        return CommandResult(dept, "Department added", Route.DEPARTMENTS)

    @_handle.register
    def _(self, command: DeleteDepartment) -> CommandResult:
        self._departments.delete(command.dept_id)
        return CommandResult(None, "Department deleted", Route.DEPARTMENTS)

    @_handle.register
    def _(self, command: SaveAccount) -> CommandResult:
        try:
            role = Role(command.role)
        except ValueError:
            raise ValidationError("Invalid account role")

        fields = dict(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            password=command.password,
            role=role,
            verified=command.verified,
        )
        if command.account_id:
            account = self._accounts.update_account(account_id=command.account_id, **fields)
            return CommandResult(account, "Account updated", Route.ACCOUNTS)
        account = self._accounts.create_account(**fields)
        return CommandResult(account, "Account created", Route.ACCOUNTS)

    @_handle.register
    def _(self, command: ResetPassword) -> CommandResult:
        self._accounts.reset_password(account_id=command.account_id, new_password=command.new_password)
        return CommandResult(None, "Password reset successfully", Route.ACCOUNTS)

    @_handle.register
    def _(self, command: DeleteAccount) -> CommandResult:
        self._accounts.delete_account(account_id=command.account_id, acting_email=self._session.email)
        return CommandResult(None, "Account deleted", Route.ACCOUNTS)

    @_handle.register
    def _(self, command: SubmitRequest) -> CommandResult:
        account = self._require_account()
        req = self._requests.create_request(
            owner_email=account.email,
            request_type=command.request_type,
            items=command.items,
        )
        return CommandResult(req, "Request submitted successfully", Route.REQUESTS)
