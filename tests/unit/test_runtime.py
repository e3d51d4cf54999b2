# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

import unittest
from concurrent.futures import ThreadPoolExecutor

from install_mcp.http import HttpResponse, StubHttpClient
from install_mcp.models.transport import TransportKind
from install_mcp.runtime import TransportProbe


def _sse(event: str) -> HttpResponse:
    return HttpResponse(
        status_code=200,
        headers={"content-type": "text/event-stream"},
        chunks=[f"event: {event}\ndata: x\n\n".encode()],
    )


class TestTransportProbeRuntime(unittest.TestCase):
    def test_detect_reuses_injected_client_and_closes(self):
        client = StubHttpClient(
            {
                ("POST", "http://a.test/mcp"): HttpResponse(status_code=200, headers={"content-type": "application/json"}),
                ("POST", "http://b.test/sse"): HttpResponse(status_code=405),
                ("GET", "http://b.test/sse"): _sse("endpoint"),
            }
        )

        with TransportProbe(http_client=client) as probe:
            self.assertIs(probe.detect("http://a.test/mcp"), TransportKind.HTTP)
            self.assertIs(probe.detect("http://b.test/sse", timeout_ms=250), TransportKind.SSE)
            self.assertIs(probe.detect("http://c.test/"), TransportKind.UNKNOWN)
            self.assertFalse(client.closed)

        self.assertTrue(client.closed)
        get = client.calls("GET")[0]
        self.assertAlmostEqual(get.timeout, 0.25)
        self.assertAlmostEqual(client.calls("POST")[0].timeout, probe.settings.timeout)

    def test_concurrent_detections_are_independent(self):
        responses = {}
        for index in range(8):
            url = f"http://server{index}.test/"
            responses[("POST", url)] = HttpResponse(status_code=404)
            responses[("GET", url)] = _sse("endpoint" if index % 2 else "message")
        client = StubHttpClient(responses)

        with TransportProbe(http_client=client) as probe, ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(probe.detect, [f"http://server{i}.test/" for i in range(8)]))

        expected = [TransportKind.SSE if i % 2 else TransportKind.HTTP for i in range(8)]
        self.assertEqual(results, expected)


if __name__ == "__main__":
    unittest.main()
