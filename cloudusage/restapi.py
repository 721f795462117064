"""Small requests based wrapper for JSON REST APIs."""

# restapi.py

import logging
import pathlib
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from jsonschema import validate, ValidationError

from .errors import DecodeError, StatusError, TransportError

file_name = pathlib.Path(__file__).name


class APIWrapper:
    """Tiny REST client: builds urls, calls endpoints and checks the record shape."""

    def __init__(
        self,
        base_url: str,
        auth_header: dict[str, str] | None = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        base_api_path: str = "",
        verify: bool = False,
    ):
        """Initialize the class.

        :param base_url: the base url for the api
        :type base_url: str
        :param auth_header: the auth header to use
        :type auth_header: dict[str, str] | None
        :param timeout: the timeout value for each call
        :type timeout: float
        :param session: an already existing session to use
        :type session: Optional[requests.Session]
        :param base_api_path: the base path of all api paths
        :type base_api_path: str
        :param verify: verify the server's TLS certificate
        :type verify: bool
        """
        if not base_api_path:
            logging.warning(f"{file_name} : No base api path found for base_url: {base_url}")

        if not auth_header:
            auth_header = {}

        # Networking defaults
        self.base_url = base_url.rstrip("/")
        self.base_api_path = base_api_path.rstrip("/")
        self.timeout = timeout
        self.verify = verify
        self.session = session or requests.Session()
        # Default headers (can be extended per request)
        default_headers = {
            "Accept": "application/json",
        }

        self.session.headers.update(default_headers)
        self.session.headers.update(auth_header)

    # -------------------------- Internal helpers ---------------------------

    def _format_path(
        self, path_template: str, path_params: Optional[Dict[str, Any]]
    ) -> str:
        """Replace placeholders like {uuid} in the path template with provided values."""
        path = f"{self.base_api_path}{path_template}"
        if path_params:
            for k, v in path_params.items():
                path = path.replace(f"{{{k}}}", str(v))
        return path

    def build_url(
        self,
        path_template: str,
        path_params: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Return the full url for an api path."""
        url = f"{self.base_url}{self._format_path(path_template, path_params)}"
        # Encode query params, ONTAP wants the commas in fields= as is
        if query_params:
            url += "?" + urlencode(query_params, doseq=True, safe=",")
        return url

    # ------------------------------ Public API ------------------------------

    def fetch(
        self,
        path_template: str,
        schema: Optional[Dict[str, Any]] = None,
        path_params: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """GET an endpoint and decode the JSON body.

        The decoded body is validated against ``schema`` when one is given.

        :raises TransportError: the request did not get a response
        :raises StatusError: the response status was not 2xx
        :raises DecodeError: the body was not JSON or did not match the schema
        """
        url = self.build_url(path_template, path_params, query_params)

        logging.debug(f"{file_name} : Calling GET {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout, verify=self.verify)
        except requests.exceptions.RequestException as e:
            raise TransportError(url, e) from e

        logging.debug(f"{file_name} : Response Status Code: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            raise StatusError(url, resp.status_code, resp.reason)

        try:
            logging.debug(f"{file_name} : Response Text: {resp.text}")
            body = resp.json()
        except ValueError as e:
            raise DecodeError(url, e) from e

        if schema:
            try:
                validate(instance=body, schema=schema)
            except ValidationError as e:
                raise DecodeError(url, e.message) from e

        return body
