from __future__ import annotations

from dataclasses import dataclass

from .accounts.service import AccountService
from .accounts.snapshot_account_repository import SnapshotAccountRepository
from .auth.session import AuthSession
from .commands import CommandDispatcher
from .database.connection import SnapshotConnection
from .database.persistent_store import PersistentStore
from .database.storage import KeyValueStore
from .departments.service import DepartmentService
from .departments.snapshot_department_repository import SnapshotDepartmentRepository
from .employees.service import EmployeeService
from .employees.snapshot_employee_repository import SnapshotEmployeeRepository
from .requests.service import RequestService
from .requests.snapshot_request_repository import SnapshotRequestRepository
from .routing.router import Router


@dataclass(frozen=True)
class Container:
    slots: KeyValueStore
    conn: SnapshotConnection

    accounts_repo: SnapshotAccountRepository
    departments_repo: SnapshotDepartmentRepository
    employees_repo: SnapshotEmployeeRepository
    requests_repo: SnapshotRequestRepository

    account_service: AccountService
    department_service: DepartmentService
    employee_service: EmployeeService
    request_service: RequestService

    session: AuthSession
    router: Router
    dispatcher: CommandDispatcher


def build_container(*, slots: KeyValueStore) -> Container:
    conn = SnapshotConnection(PersistentStore(slots))

    accounts_repo = SnapshotAccountRepository(conn)
    departments_repo = SnapshotDepartmentRepository(conn)
    employees_repo = SnapshotEmployeeRepository(conn)
    requests_repo = SnapshotRequestRepository(conn)

    account_service = AccountService(accounts_repo, slots)
    department_service = DepartmentService(departments_repo)
    employee_service = EmployeeService(employees_repo, accounts_repo, departments_repo)
    request_service = RequestService(requests_repo)

    session = AuthSession(accounts_repo, slots)
    router = Router(session)
    dispatcher = CommandDispatcher(
        conn=conn,
        session=session,
        accounts=account_service,
        departments=department_service,
        employees=employee_service,
        requests=request_service,
    )

    return Container(
        slots=slots,
        conn=conn,
        accounts_repo=accounts_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        requests_repo=requests_repo,
        account_service=account_service,
        department_service=department_service,
        employee_service=employee_service,
        request_service=request_service,
        session=session,
        router=router,
        dispatcher=dispatcher,
    )
