from jolt.di import ErrorHandlerProtocol, LoggingErrorHandler, ServiceNotRegisteredError


class FakeLogger:
    def __init__(self) -> None:
        self.errors: list[tuple[str, dict]] = []

    def error(self, message: str, **kwargs) -> None:
        self.errors.append((message, kwargs))


class Thing:
    pass


def test_logging_error_handler_satisfies_protocol():
    assert isinstance(LoggingErrorHandler(), ErrorHandlerProtocol)


def test_on_error_logs_plain_exception():
    handler = LoggingErrorHandler()
    fake = FakeLogger()
    handler._logger = fake
    error = RuntimeError("boom")

    handler.on_error(error)

    message, context = fake.errors[0]
    assert message == "boom"
    assert context["error_type"] == "RuntimeError"
    assert context["exc_info"][1] is error


def test_on_error_includes_jolt_error_details():
    handler = LoggingErrorHandler()
    fake = FakeLogger()
    handler._logger = fake

    handler.on_error(ServiceNotRegisteredError(Thing), "Navigation failed")

    message, context = fake.errors[0]
    assert message == "Navigation failed"
    assert context["code"] == "DI_SERVICE_NOT_REGISTERED"
    assert context["category"] == "DI"
    assert context["contract"].endswith("Thing")
