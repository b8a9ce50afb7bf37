"""Pytest configuration and shared fixtures."""

import pytest

WRK_OUTPUT = """
Running 30s test @ http://127.0.0.1:3000
  16 threads and 500 connections
  Thread Stats   Avg      Stdev     Max   +/- Stdev
    Latency   814.27us  498.47us   8.42ms   69.23%
    Req/Sec    36.10k     2.64k   74.83k    75.41%
  Latency Distribution
     50%  707.00us
     75%    1.07ms
     90%    1.50ms
     99%    2.56ms
  17275966 requests in 30.09s, 1.95GB read
Requests/sec: 574184.09
Transfer/sec:     66.26MB

691 Errors: error shutting down connection: Socket is not connected (os error 57)
"""

WRK_OUTPUT_NO_DISTRIBUTION = """
Running 30s test @ http://127.0.0.1:3000
  16 threads and 200 connections
  Thread Stats   Avg      Stdev     Max   +/- Stdev
    Latency   392.28us  199.70us   4.67ms   70.95%
    Req/Sec    29.50k     0.98k   33.01k    68.63%
  14134927 requests in 30.10s, 1.59GB read
Requests/sec: 469597.42
Transfer/sec:     54.19MB
"""

HEY_OUTPUT = """
Summary:
  Total:\t2.0105 secs
  Slowest:\t0.1025 secs
  Fastest:\t0.0011 secs
  Average:\t0.0090 secs
  Requests/sec:\t9947.4281

  Total data:\t2340000 bytes
  Size/request:\t117 bytes

Response time histogram:
  0.001 [1]\t|
  0.011 [15203]\t|■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■

Latency distribution:
  10% in 0.0030 secs
  25% in 0.0049 secs
  50% in 0.0074 secs
  75% in 0.0111 secs
  90% in 0.0160 secs
  95% in 0.0200 secs
  99% in 0.0316 secs

Details (average, fastest, slowest):
  DNS+dialup:\t0.0000 secs, 0.0011 secs, 0.1025 secs
  resp wait:\t0.0088 secs, 0.0010 secs, 0.1000 secs

Status code distribution:
  [200]\t19990 responses
  [503]\t10 responses
"""


@pytest.fixture
def wrk_output() -> str:
    """wrk --latency output with a latency distribution and trailing error noise."""
    return WRK_OUTPUT


@pytest.fixture
def wrk_output_no_distribution() -> str:
    """wrk output without the --latency distribution section."""
    return WRK_OUTPUT_NO_DISTRIBUTION


@pytest.fixture
def hey_output() -> str:
    """hey output with summary, distribution and status codes."""
    return HEY_OUTPUT


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep tests independent of the developer's env vars and config file."""
    for var in ("BENCHREPORT_FORMAT", "BENCHREPORT_STRICT", "BENCHREPORT_VERBOSITY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(
        "benchreport.config.user_config.get_user_config_path",
        lambda: tmp_path / "no-such-config.yaml",
    )
