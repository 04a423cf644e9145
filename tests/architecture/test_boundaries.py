from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core must not import from the middleware packages built on top of it.
    It is the foundation and must remain independent.
    """
    (
        archrule("core_is_independent")
        .match("middy_core*")
        .should_not_import("middy_tracing*")
        .should_not_import("middy_problem_details*")
        .check("middy_core")
    )


def test_tracing_independence() -> None:
    """
    Tracing depends on Core only; error shaping is a separate concern.
    """
    (
        archrule("tracing_is_independent")
        .match("middy_tracing*")
        .should_not_import("middy_problem_details*")
        .check("middy_tracing")
    )


def test_problem_details_independence() -> None:
    """
    Problem details depends on Core only; tracing is a separate concern.
    """
    (
        archrule("problem_details_is_independent")
        .match("middy_problem_details*")
        .should_not_import("middy_tracing*")
        .check("middy_problem_details")
    )


def test_ports_layering() -> None:
    """
    Ports (protocols) should not depend on the engine that consumes them.
    """
    (
        archrule("ports_layering")
        .match("middy_core.ports*")
        .should_not_import("middy_core.middleware*")
        .should_not_import("middy_core.function*")
        .check("middy_core")
    )


def test_events_isolation() -> None:
    """
    Event models describe payloads only.
    They must not import the engine or the entry points.
    """
    (
        archrule("events_isolation")
        .match("middy_core.events*")
        .should_not_import("middy_core.middleware*")
        .should_not_import("middy_core.function*")
        .should_not_import("middy_core.lifecycle*")
        .check("middy_core")
    )
