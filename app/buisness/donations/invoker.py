"""
LedgerInvoker - named-command surface for the donation ledger

Callers name an operation and pass positional string arguments. The invoker
checks the command and its arity, routes it to DonationLedgerContext or
LedgerQueryService, and turns the outcome into an InvokeResult: either a
success payload (bytes, possibly empty) or a short failure message.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple
from app.buisness.donations.context import DonationLedgerContext
from app.buisness.donations.errors import DonationDomainError, InvalidArgument, StorageFailure
from app.services.donations.ledger_query_service import LedgerQueryService
from app.utils.logging_sanitizer import sanitize_invocation, sanitize_exception_message
from app.logger import get_logger

logger = get_logger("donation_ledger.buisness.donations.invoker")


@dataclass(frozen=True)
class InvokeResult:
    ok: bool
    payload: bytes = b''
    message: str = ''
    error_type: Optional[str] = None
    tx_id: Optional[str] = None

    @classmethod
    def success(cls, payload: bytes = b'', tx_id: Optional[str] = None) -> 'InvokeResult':
        return cls(ok=True, payload=payload or b'', tx_id=tx_id)

    @classmethod
    def failure(cls, error: DonationDomainError) -> 'InvokeResult':
        return cls(ok=False, message=error.message, error_type=type(error).__name__)


class LedgerInvoker:
    """
    Command router for ledger operations.

    COMMANDS maps each command name to its positional parameter names.
    """

    COMMANDS: Dict[str, Tuple[str, ...]] = {
        'enroll_donor': ('id', 'name', 'phone'),
        'enroll_npo': ('id', 'name'),
        'enroll_recipient': ('id', 'name', 'type'),
        'enroll_needs': ('need_id', 'npo_id', 'name', 'product_type', 'total_count'),
        'propose_asset': ('id', 'name', 'donor_id', 'npo_id', 'product_type', 'picture_hash'),
        'approve_asset': ('asset_id', 'npo_id'),
        'delete_asset': ('asset_id', 'npo_id'),
        'borrow_asset': ('asset_id', 'recipient_id'),
        'give_asset': ('asset_id', 'recipient_id'),
        'get_back_asset': ('asset_id', 'recipient_id'),
        'query': ('id',),
        'read_everything': (),
        'get_history': ('asset_id',),
    }

    READ_ONLY = {'query', 'read_everything', 'get_history'}

    def __init__(
        self,
        ctx: Optional[DonationLedgerContext] = None,
        query_service: Optional[LedgerQueryService] = None,
    ):
        self.ctx = ctx or DonationLedgerContext()
        self.query_service = query_service or LedgerQueryService(self.ctx.adapter)

    def invoke(self, function: str, args: Optional[Sequence[str]] = None) -> InvokeResult:
        """
        Run one named command.

        Args:
            function: Command name
            args: Positional string arguments

        Returns:
            InvokeResult: success payload or failure message; never raises domain errors
        """
        args = list(args or [])
        param_names = self.COMMANDS.get(function, ())
        logger.info(f"starting invoke, for - {function} {sanitize_invocation(param_names, args)}")

        self.ctx.last_tx_id = None
        try:
            payload = self._dispatch(function, args)
        except StorageFailure as e:
            cause = sanitize_exception_message(e.__cause__) if e.__cause__ else ''
            logger.error(f"{function} failed: {e.message} {cause}".rstrip())
            return InvokeResult.failure(e)
        except DonationDomainError as e:
            logger.warning(f"{function} rejected: {type(e).__name__}: {e.message}")
            return InvokeResult.failure(e)

        return InvokeResult.success(payload, tx_id=None if function in self.READ_ONLY else self.ctx.last_tx_id)

    def _dispatch(self, function: str, args: list) -> bytes:
        if function not in self.COMMANDS:
            raise InvalidArgument(f"Received unknown invoke function name - '{function}'")

        expected = len(self.COMMANDS[function])
        if len(args) != expected:
            raise InvalidArgument(f"Incorrect number of arguments. Expecting {expected}")
        if not all(isinstance(arg, str) for arg in args):
            raise InvalidArgument("Arguments must be strings")

        if function == 'query':
            return self.query_service.query(args[0])
        if function == 'read_everything':
            return self.query_service.read_everything()
        if function == 'get_history':
            return self.query_service.get_history(args[0])

        # Every remaining command is a context operation of the same name
        getattr(self.ctx, function)(*args)
        return b''
