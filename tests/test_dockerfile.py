"""Unit tests for build definition rendering."""

from __future__ import annotations

from rockerize.config import RockerizeConfig
from rockerize.generator import render_build_definition


def _lines_starting(text: str, prefix: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith(prefix)]


def test_rendering_is_deterministic() -> None:
    first = render_build_definition("app", [80, 443], ["a.txt"])
    second = render_build_definition("app", [80, 443], ["a.txt"])
    assert first == second


def test_expose_and_copy_lines_in_order() -> None:
    text = render_build_definition("app", [8080, 22, 443], ["logo.jpg", "index.html"])

    assert _lines_starting(text, "EXPOSE ") == ["EXPOSE 8080", "EXPOSE 22", "EXPOSE 443"]
    local_copies = [line for line in _lines_starting(text, "COPY ") if line.endswith(" ./") and "--from" not in line]
    assert local_copies == ["COPY ./ ./", "COPY logo.jpg ./", "COPY index.html ./"]


def test_empty_ports_and_files_produce_no_lines() -> None:
    text = render_build_definition("app", [], [])

    assert _lines_starting(text, "EXPOSE") == []
    assert "COPY  ./" not in text
    assert [line for line in _lines_starting(text, "COPY ") if "--from" not in line] == ["COPY ./ ./"]


def test_binary_name_is_interpolated() -> None:
    text = render_build_definition("my-server", [], [])

    assert "COPY --from=builder /src/target/release/my-server /" in text
    assert 'ENTRYPOINT ["/my-server"]' in text


def test_two_stage_layout() -> None:
    text = render_build_definition("app", [80], [])
    lines = text.splitlines()

    assert lines.index("FROM rust:alpine AS builder") < lines.index("FROM scratch as final")
    assert "RUN cargo build --release" in lines
    assert "RUN apk add --no-cache ca-certificates libc-dev" in lines
    assert "COPY --from=builder /user/group /user/passwd /etc/" in lines
    assert "COPY --from=builder /etc/ssl/certs/ca-certificates.crt /etc/ssl/certs/" in lines
    assert lines.index("EXPOSE 80") < lines.index("USER nobody:nobody") < lines.index('ENTRYPOINT ["/app"]')


def test_config_controls_builder_image() -> None:
    config = RockerizeConfig(builder_image="rust:1.80-alpine", maintainer="ops@example.com")
    text = render_build_definition("app", [], [], config=config)

    assert "FROM rust:1.80-alpine AS builder" in text
    assert 'LABEL maintainer="ops@example.com"' in text
