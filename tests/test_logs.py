import logging

from invoice_dapp.lib import logs


def test_module_loggers_are_children_of_package_logger() -> None:
    log = logs.logger("/srv/app/src/invoice_dapp/controller.py")
    assert log.name == "invoice_dapp.controller"
    assert log.parent is logging.getLogger(logs.ROOT_NAME)
    assert log.propagate is True


def test_only_package_logger_has_a_handler() -> None:
    first = logs.logger("session")
    second = logs.logger("state")
    root = logging.getLogger(logs.ROOT_NAME)

    assert first.handlers == []
    assert second.handlers == []
    assert len(root.handlers) == 1
    logs.logger("session")
    assert len(root.handlers) == 1
