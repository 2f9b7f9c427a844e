"""
GitHub Gist transport: one JSON file in a private gist holds the document.

pull() and push() never raise for network or payload problems. A failed
pull returns None, meaning "no remote data", and a failed push returns False.
"""

import json

import requests

from .models import SCHEMA_VERSION, build_document, parse_document

GITHUB_API_URL = 'https://api.github.com'
DEFAULT_FILENAME = 'training_plan.json'


class GistTransport:
    def __init__(self, token, gist_id=None, filename=DEFAULT_FILENAME,
                 api_url=GITHUB_API_URL, timeout=15):
        self.token = token
        self.gist_id = gist_id or None
        self.filename = filename or DEFAULT_FILENAME
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout

    def _headers(self):
        return {
            'Accept': 'application/vnd.github+json',
            'Authorization': f'token {self.token}',
        }

    def fetch_document(self):
        """Return the raw (version, sessions) document, or None."""
        if not self.token or not self.gist_id:
            return None

        try:
            resp = requests.get(
                f"{self.api_url}/gists/{self.gist_id}",
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            print(f"✗ Error fetching gist: {e}")
            return None

        if resp.status_code != 200:
            print(f"✗ Error fetching gist: {resp.status_code}")
            return None

        try:
            content = resp.json().get('files', {}).get(self.filename, {}).get('content')
        except (ValueError, AttributeError):
            print("✗ Gist response was not valid JSON")
            return None
        if not content:
            return None
        if not isinstance(content, str):
            print(f"✗ {self.filename} in gist {self.gist_id} has no text content")
            return None

        try:
            return parse_document(json.loads(content))
        except ValueError:
            print(f"✗ {self.filename} in gist {self.gist_id} is not a valid plan document")
            return None

    def pull(self):
        doc = self.fetch_document()
        if doc is None:
            return None
        return doc[1]

    def push(self, sessions, version=SCHEMA_VERSION):
        if not self.token:
            return False

        body = {
            'files': {self.filename: {'content': json.dumps(build_document(sessions, version), indent=2)}},
            'description': 'Training plan sync',
            'public': False,
        }
        if self.gist_id:
            method, url = 'PATCH', f"{self.api_url}/gists/{self.gist_id}"
        else:
            method, url = 'POST', f"{self.api_url}/gists"

        try:
            resp = requests.request(method, url, headers=self._headers(), json=body, timeout=self.timeout)
        except requests.RequestException as e:
            print(f"✗ Error pushing to gist: {e}")
            return False

        if resp.status_code not in (200, 201):
            print(f"✗ Error pushing to gist: {resp.status_code}")
            return False

        if not self.gist_id:
            try:
                self.gist_id = resp.json().get('id')
            except ValueError:
                print("✗ Gist created but the response had no id")
                return True
            print(f"✓ Created gist {self.gist_id}")
        return True

    def check(self):
        """True when the gist can be read and holds a plan document."""
        return self.fetch_document() is not None
