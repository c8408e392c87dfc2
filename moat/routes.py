"""Routes for the OAuth endpoints and the v3.0 member/public API."""

from flask import Blueprint, Response, current_app, redirect, request

from arxiv import status

from . import negotiate
from .controllers import activities, oauth, records, search
from .services.store import current_store


auth = Blueprint('oauth', __name__, url_prefix='/oauth')
api = Blueprint('api', __name__, url_prefix='/v3.0')

HANDLER_NAMES = {
    'oauth.issue_token': 'issue_token',
    'oauth.authorize': 'authorize',
    'api.get_record': 'get_record',
    'api.get_person': 'get_person',
    'api.get_work': 'get_work',
    'api.create_work': 'create_work',
    'api.update_work': 'update_work',
    'api.get_employment': 'get_employment',
    'api.create_employment': 'create_employment',
    'api.update_employment': 'update_employment',
    'api.search_registry': 'search',
}
"""Endpoint to handler name, for request logs."""


@auth.route('/token', methods=['POST'])
def issue_token() -> Response:
    """Client authentication endpoint."""
    data, status_code, headers = oauth.issue_token(
        request.get_data(as_text=True), request.mimetype
    )
    return negotiate.respond_json(data, status_code, headers)


@auth.route('/authorize', methods=['GET'])
def authorize() -> Response:
    """User-facing endpoint for the authorization code workflow."""
    target = oauth.authorize(request.args.get('redirect_uri'),
                             request.args.get('state'))
    return redirect(target, code=status.HTTP_302_FOUND)


@api.route('/<string:orcid>/record', methods=['GET'])
def get_record(orcid: str) -> Response:
    """Full profile."""
    data, status_code, headers = records.get_record(current_store(), orcid)
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/person', methods=['GET'])
def get_person(orcid: str) -> Response:
    """Person section of a profile."""
    data, status_code, headers = records.get_person(current_store(), orcid)
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/work/<int:put_code>', methods=['GET'])
def get_work(orcid: str, put_code: int) -> Response:
    data, status_code, headers = activities.get_work(put_code)
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/work', methods=['POST'])
def create_work(orcid: str) -> Response:
    data, status_code, headers = activities.create_activity(
        current_app.config['API_HOST'], orcid, activities.WORK
    )
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/work/<int:put_code>', methods=['PUT'])
def update_work(orcid: str, put_code: int) -> Response:
    data, status_code, headers = activities.update_activity(
        current_app.config['API_HOST'], orcid, activities.WORK, put_code
    )
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/employment/<int:put_code>', methods=['GET'])
def get_employment(orcid: str, put_code: int) -> Response:
    data, status_code, headers = activities.get_employment(put_code)
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/employment', methods=['POST'])
def create_employment(orcid: str) -> Response:
    data, status_code, headers = activities.create_activity(
        current_app.config['API_HOST'], orcid, activities.EMPLOYMENT
    )
    return negotiate.respond(data, status_code, headers)


@api.route('/<string:orcid>/employment/<int:put_code>', methods=['PUT'])
def update_employment(orcid: str, put_code: int) -> Response:
    data, status_code, headers = activities.update_activity(
        current_app.config['API_HOST'], orcid, activities.EMPLOYMENT,
        put_code
    )
    return negotiate.respond(data, status_code, headers)


@api.route('/search', methods=['GET'])
def search_registry() -> Response:
    """Search for profiles; ``q`` containing "error" fails on purpose."""
    data, status_code, headers = search.search(
        request.args.get('q'), current_app.config['ORCID_HOST']
    )
    return negotiate.respond(data, status_code, headers)
