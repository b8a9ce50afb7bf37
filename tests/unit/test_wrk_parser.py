"""Tests for the wrk output parser and its field locators."""

from benchreport.domain.metrics import Latency, Metrics, Request, Transfer
from benchreport.parsing.wrk import (
    locate_latency,
    locate_percentiles,
    locate_requests_per_sec,
    locate_total_requests,
    locate_transfer_rate,
    locate_transfer_total,
    parse_wrk,
)


class TestParseWrk:
    """End-to-end parsing of wrk output."""

    def test_full_output(self, wrk_output):
        expected = Metrics(
            latency=Latency(
                avg=0.8143,
                stdev=0.4985,
                max=8.4200,
                p50=0.7070,
                p75=1.0700,
                p90=1.5000,
                p99=2.5600,
            ),
            request=Request(total="17275966", req_per_sec="574184.09"),
            transfer=Transfer(total="1.95GB", rate="66.26MB"),
        )
        assert parse_wrk(wrk_output) == expected

    def test_without_distribution_percentiles_are_absent(self, wrk_output_no_distribution):
        metrics = parse_wrk(wrk_output_no_distribution)
        assert metrics.latency.avg == 0.3923
        assert metrics.latency.stdev == 0.1997
        assert metrics.latency.max == 4.67
        assert (metrics.latency.p50, metrics.latency.p75) == (0.0, 0.0)
        assert (metrics.latency.p90, metrics.latency.p99) == (0.0, 0.0)
        assert not metrics.latency.has_distribution
        assert metrics.request.total == "14134927"

    def test_empty_input_degrades_to_defaults(self):
        metrics = parse_wrk("")
        assert metrics == Metrics()
        assert metrics.latency.avg == 0.0
        assert metrics.request.total == ""
        assert metrics.transfer.rate == ""

    def test_field_order_does_not_matter(self, wrk_output):
        reordered = "\n".join(reversed(wrk_output.splitlines()))
        metrics = parse_wrk(reordered)
        assert metrics.latency.avg == 0.8143
        assert metrics.request.req_per_sec == "574184.09"
        assert metrics.transfer.total == "1.95GB"

    def test_partial_output_keeps_located_fields(self):
        metrics = parse_wrk("Requests/sec: 1234.56\nsocket error: connection refused\n")
        assert metrics.request.req_per_sec == "1234.56"
        assert metrics.request.total == ""
        assert metrics.latency.max == 0.0


class TestLatencyLocators:
    """Tests for latency and percentile locators."""

    def test_latency_triple_mixed_units(self):
        assert locate_latency("    Latency   1.20s  300.00ms   2.00s   90.00%") == (
            1200.0,
            300.0,
            2000.0,
        )

    def test_latency_missing(self):
        assert locate_latency("Req/Sec 36.10k") == (0.0, 0.0, 0.0)

    def test_percentiles(self, wrk_output):
        assert locate_percentiles(wrk_output) == (0.707, 1.07, 1.5, 2.56)

    def test_percentile_without_unit_is_zero(self):
        text = "Latency Distribution\n 50% 1.00ms\n 75% 2.00\n 90% 3.00ms\n 99% 4.00ms\n"
        assert locate_percentiles(text) == (1.0, 0.0, 3.0, 4.0)

    def test_incomplete_distribution_is_absent(self):
        text = "Latency Distribution\n 50% 1.00ms\n 75% 2.00ms\n"
        assert locate_percentiles(text) == (0.0, 0.0, 0.0, 0.0)


class TestRequestAndTransferLocators:
    """Tests for request and transfer locators."""

    def test_total_requests(self, wrk_output):
        assert locate_total_requests(wrk_output) == "17275966"

    def test_requests_per_sec(self, wrk_output):
        assert locate_requests_per_sec(wrk_output) == "574184.09"

    def test_req_sec_thread_stat_is_not_requests_per_sec(self):
        assert locate_requests_per_sec("    Req/Sec    36.10k     2.64k") == ""

    def test_transfer_total(self, wrk_output):
        assert locate_transfer_total(wrk_output) == "1.95GB"

    def test_transfer_total_removes_inner_whitespace(self):
        assert locate_transfer_total("100 requests in 1.00s, 512.00 KB read") == "512.00KB"

    def test_transfer_total_plain_bytes(self):
        assert locate_transfer_total("3 requests in 1.00s, 300.00B read") == "300.00B"

    def test_transfer_rate(self, wrk_output):
        assert locate_transfer_rate(wrk_output) == "66.26MB"

    def test_transfer_rate_removes_inner_whitespace(self):
        assert locate_transfer_rate("Transfer/sec:   1.50 MB") == "1.50MB"

    def test_missing_fields_are_empty_strings(self):
        assert locate_total_requests("") == ""
        assert locate_requests_per_sec("") == ""
        assert locate_transfer_total("") == ""
        assert locate_transfer_rate("") == ""
