from .camel_model import CamelModel as CamelModel
from .http_response import api_response as api_response
from .http_response import error_response as error_response
from .http_response import internal_error_response as internal_error_response
from .http_response import status_code_for as status_code_for
from .http_response import validation_error_response as validation_error_response
from .request import parse_body as parse_body
from .request import parse_query as parse_query
from .validators import strip_text as strip_text
from .validators import to_decimal as to_decimal
