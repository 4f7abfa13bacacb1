from .limits import max_body_size_middleware, timeout_middleware
from .request_id import request_id_middleware

__all__ = ["max_body_size_middleware", "request_id_middleware", "timeout_middleware"]
