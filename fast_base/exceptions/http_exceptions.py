from quart import jsonify
from fast_base.utils.serialisation import serialise, get_exception_error_type


class HttpException(Exception):
    def __init__(self, status_code, *, error_type=None, message=None, data=None):
        super().__init__(message)
        self._message = message
        self._error_type = error_type or get_exception_error_type(self)
        self._status_code = status_code
        self._data = data

    def dict(self):
        return {
            "error_type": self._error_type,
            "message": self._message,
            "data": self._data
        }

    @property
    def status_code(self):
        return self._status_code

    @property
    def error_type(self):
        return self._error_type

    @property
    def data(self):
        return self._data

    def to_response(self):
        return jsonify(serialise(self.dict())), self.status_code

class UnprocessableEntityException(HttpException):
    def __init__(self, **kwargs):
        super().__init__(
            status_code=422,
            **kwargs
        )
