import importlib.util
import os
import tempfile
import unittest
from unittest import mock

from domain.entities import ContentFragment
from infrastructure.config import build_default_container
from infrastructure.storage.in_memory_corpus_index import InMemoryCorpusIndex

FRAGMENTS = [
    ContentFragment(id="1", title="Toilet Installation Steps", body="Turn off water supply then remove bolts " * 20),
    ContentFragment(id="2", title="Pipe Fitting", body="Use PEX fittings"),
]


def _api_module():
    log_file = os.path.join(tempfile.gettempdir(), "tutorsearch-test.log")
    with mock.patch.dict(os.environ, {"TUTORSEARCH_LOG_FILE": log_file}, clear=False):
        from ui.api import main  # noqa: PLC0415
    return main


@unittest.skipIf(
    importlib.util.find_spec("fastapi") is None or importlib.util.find_spec("httpx") is None,
    "fastapi or httpx not installed",
)
class TestApi(unittest.TestCase):
    def _client(self, corpus_index=None):
        from fastapi.testclient import TestClient  # noqa: PLC0415

        container = build_default_container()
        container.corpus_index = corpus_index if corpus_index is not None else InMemoryCorpusIndex(FRAGMENTS)
        self.main = _api_module()
        return TestClient(self.main.create_app(container))

    def test_health(self):
        response = self._client().get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok", "fragments": 2})

    def test_search(self):
        response = self._client().get("/search", params={"q": "toilet installation steps", "limit": 2})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["limit"], 2)
        self.assertEqual([r["id"] for r in payload["results"]], ["1", "2"])
        self.assertEqual(payload["results"][0]["relevance"], 1.0)
        self.assertEqual(payload["results"][1]["relevance"], 0.0)

    def test_search_uses_default_limit(self):
        payload = self._client().get("/search", params={"q": "pipe"}).json()
        self.assertEqual(payload["limit"], 5)
        self.assertEqual(len(payload["results"]), 2)

    def test_search_rejects_non_positive_limit(self):
        response = self._client().get("/search", params={"q": "pipe", "limit": 0})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "invalid_argument")
        self.assertFalse(response.json()["success"])

    def test_search_on_unloaded_corpus(self):
        response = self._client(InMemoryCorpusIndex(ready=False)).get("/search", params={"q": "pipe"})
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["error"], "retrieval_unavailable")

    def test_fragments_are_previewed(self):
        payload = self._client().get("/fragments").json()
        self.assertEqual(payload["total"], 2)
        self.assertEqual(len(payload["fragments"][0]["body"]), 203)
        self.assertTrue(payload["fragments"][0]["body"].endswith("..."))
        self.assertEqual(payload["fragments"][1]["body"], "Use PEX fittings")

    def test_diagnostics(self):
        response = self._client().get("/api/test-pdf")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertTrue(payload["success"])
        self.assertEqual(payload["stats"], {"totalTestQueries": 5, "successfulQueries": 5, "totalResults": 10})
        first = payload["testResults"][0]
        self.assertEqual(first["query"], "toilet installation steps")
        self.assertEqual(first["resultCount"], 2)
        self.assertEqual(first["results"][0]["id"], "1")

    def test_diagnostics_on_empty_corpus(self):
        payload = self._client(InMemoryCorpusIndex()).get("/api/test-pdf").json()
        self.assertEqual(payload["stats"]["totalResults"], 0)
        self.assertEqual(payload["stats"]["successfulQueries"], 5)

    def test_diagnostics_on_unloaded_corpus_reports_inline_errors(self):
        response = self._client(InMemoryCorpusIndex(ready=False)).get("/api/test-pdf")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["stats"]["successfulQueries"], 0)
        for entry in payload["testResults"]:
            self.assertEqual(entry["resultCount"], 0)
            self.assertIn("error", entry)

    def test_diagnostics_failure_envelope(self):
        client = self._client()
        with mock.patch.object(self.main, "run_diagnostics", side_effect=RuntimeError("boom")):
            response = client.get("/api/test-pdf")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(),
            {"success": False, "error": "PDF system test failed", "message": "boom"},
        )


if __name__ == "__main__":
    unittest.main()
