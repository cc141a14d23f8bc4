from flask import Response, jsonify, request
from app import limiter
from app.presentation.routes.ledger import ledger_bp
from app.buisness.donations.invoker import InvokeResult, LedgerInvoker
from app.services.donations.ledger_query_service import LedgerQueryService
from app.buisness.donations.errors import DonationDomainError
from app.logger import get_logger

logger = get_logger("donation_ledger.routes.ledger")

# Failure type -> HTTP status
ERROR_STATUS = {
    'InvalidArgument': 400,
    'InvalidTransition': 400,
    'OwnershipMismatch': 403,
    'NotFound': 404,
    'DuplicateRecord': 409,
    'StorageFailure': 500,
}

TX_ID_HEADER = 'X-Ledger-Tx-Id'


def _respond(result: InvokeResult):
    if not result.ok:
        status = ERROR_STATUS.get(result.error_type, 500)
        return jsonify({'error': result.message, 'type': result.error_type}), status

    response = Response(result.payload, status=200, mimetype='application/json')
    if result.tx_id:
        response.headers[TX_ID_HEADER] = result.tx_id
    return response


@ledger_bp.post('/invoke')
@limiter.limit("120 per minute")
def invoke():
    """Run one named ledger command: {"function": str, "args": [str, ...]}"""
    body = request.get_json(silent=True)
    if not isinstance(body, dict) or not isinstance(body.get('function'), str):
        return jsonify({'error': 'Request body must be a JSON object with a "function" name', 'type': 'InvalidArgument'}), 400

    args = body.get('args', [])
    if not isinstance(args, list):
        return jsonify({'error': '"args" must be a list of strings', 'type': 'InvalidArgument'}), 400

    return _respond(LedgerInvoker().invoke(body['function'], args))


@ledger_bp.get('/query/<path:key>')
def query(key):
    return _respond(LedgerInvoker().invoke('query', [key]))


@ledger_bp.get('/everything')
def everything():
    return _respond(LedgerInvoker().invoke('read_everything', []))


@ledger_bp.get('/history/<path:asset_id>')
def history(asset_id):
    return _respond(LedgerInvoker().invoke('get_history', [asset_id]))


@ledger_bp.get('/integrity')
def integrity():
    """Relationship-invariant violations across the ledger"""
    try:
        violations = LedgerQueryService().check_integrity()
    except DonationDomainError as e:
        logger.error(f"Integrity check failed: {e.message}")
        return jsonify({'error': e.message, 'type': type(e).__name__}), ERROR_STATUS.get(type(e).__name__, 500)

    return jsonify({'consistent': not violations, 'violations': violations})
