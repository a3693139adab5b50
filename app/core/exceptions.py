# app/core/exceptions.py
#
# Domain errors raised by repositories and services.
# Routers translate them into HTTP status codes:
#   ValidationError -> 400
#   NotFoundError   -> 404
#   StoreError      -> 500


class KasirError(Exception):
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ValidationError(KasirError):
    status_code = 400


class NotFoundError(KasirError):
    status_code = 404


class StoreError(KasirError):
    status_code = 500
