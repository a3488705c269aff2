def test_import_termquest_package() -> None:
    import importlib

    module = importlib.import_module("termquest")
    assert module is not None


def test_import_services_no_side_effects() -> None:
    from termquest.services import Terminal
    from termquest.core.scheduler import ManualScheduler

    terminal = Terminal(scheduler=ManualScheduler())
    assert terminal.prompt == "user@computer:~$ "
