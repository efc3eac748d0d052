import pytest

# Markers skipped at each verification level.
_SKIPPED_MARKERS: dict[str, tuple[str, ...]] = {
    "fast": ("full", "slow"),
    "standard": ("full",),
    "full": (),
}


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--verification-level",
        action="store",
        default="standard",
        choices=tuple(_SKIPPED_MARKERS),
        help=(
            "fast skips slow and full interval checks, standard skips "
            "full ones, full runs everything."
        ),
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    level = config.getoption("--verification-level")
    skipped = _SKIPPED_MARKERS[level]
    if not skipped:
        return

    for item in items:
        for marker in skipped:
            if marker in item.keywords:
                item.add_marker(
                    pytest.mark.skip(
                        reason=f"'{marker}' tests skipped at "
                        f"--verification-level={level}"
                    )
                )
                break
