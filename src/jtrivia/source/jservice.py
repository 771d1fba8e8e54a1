"""
jService question source.

Performs one blocking GET against the random-question endpoint per call and
hands back the raw body text. Parsing is left to the decoder.
"""

import requests

from .base import BaseQuestionSource
from ..errors import ResponseReadError, TransportError


class JServiceSource(BaseQuestionSource):
    """
    Fetches random questions from jService over plain HTTP.

    Each call opens its own session and asks the server to close the
    connection after the response, so nothing is reused between calls.
    Failures are raised immediately; there is no retry.
    """

    def fetch(self) -> str:
        """
        Request one random question.

        Returns:
            str: Response body decoded as UTF-8 and stripped of surrounding whitespace

        Raises:
            TransportError: If the request could not be completed
            ResponseReadError: If the body could not be read or is not valid UTF-8
        """
        url = self.config.endpoint
        self.logger.debug(f"Requesting random question from {url}")

        with requests.Session() as session:
            try:
                response = session.get(
                    url,
                    headers={'Connection': 'close'},
                    timeout=self.config.timeout,
                    stream=True
                )
            except requests.exceptions.RequestException as e:
                self.logger.error(f"Request to {url} failed: {e}")
                raise TransportError(f"request to {url} failed: {e}") from e

            with response:
                if not response.ok:
                    self.logger.warning(f"{url} answered with HTTP {response.status_code}")

                try:
                    body = response.content.decode('utf-8')
                except (requests.exceptions.RequestException, UnicodeDecodeError) as e:
                    self.logger.error(f"Failed to read response from {url}: {e}")
                    raise ResponseReadError(f"failed to read response from {url}: {e}") from e

        self.logger.debug(f"Received {len(body)} characters from {url}")
        return body.strip()
