"""
Authorize endpoint service.

This Flask application is the gate in front of the OAuth2/OpenID Connect
authorization flows. For each request to ``/authorize`` it decides whether
the request is acceptable. Acceptable requests are handed on to the code or
token issuing machinery; the rest get a localized error page that, when it is
safe to do so, offers a way back to the client carrying the error and the
client's ``state``.

Every failed request is recorded as exactly one structured, locale-independent
audit event (see :mod:`gatekeeper.audit`).

The request validator, the localization backend and the audit event sink are
collaborators; default implementations live in :mod:`gatekeeper.services`.
"""
