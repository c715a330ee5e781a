from blm_kit.observability import MetricsHook, NoOpMetricsHook, names


def test_noop_hook_accepts_every_parse_metric() -> None:
    hook: MetricsHook = NoOpMetricsHook()

    hook.record_latency(names.BLM_PARSE_DURATION, 1.5)
    hook.record_latency(names.BLM_READ_DURATION, 0.5)
    hook.increment(names.BLM_PARSES_TOTAL)
    hook.increment(names.BLM_RECORDS_PARSED, 3)
    hook.increment(names.BLM_ERRORS_TOTAL, labels={"stage": "data"})
    hook.record_gauge(names.BLM_FIELD_COUNT, 7)


def test_metric_names_are_unique() -> None:
    metric_names = [
        value for key, value in vars(names).items() if key.startswith("BLM_")
    ]

    assert len(metric_names) == len(set(metric_names))
