"""Two-stage build definition template for rockerized images."""
from __future__ import annotations

from typing import Iterable, Optional

from ..config import RockerizeConfig

# https://hub.docker.com/_/rust
DOCKERFILE_TEMPLATE = """
# {definition_filename}

FROM {builder_image} AS builder

LABEL maintainer="{maintainer}"

# Add unprivileged user/group
RUN mkdir /user && \\
    echo 'nobody:x:65534:65534:nobody:/:' > /user/passwd && \\
    echo 'nobody:x:65534:' > /user/group

# Install certs
RUN apk add --no-cache ca-certificates libc-dev

# Working directory
WORKDIR /src

# Copy source files
COPY ./ ./

# Build source files
RUN cargo build --release

# Minimal image for running the application
FROM scratch as final

# Copy files from temporary image
COPY --from=builder /user/group /user/passwd /etc/
COPY --from=builder /etc/ssl/certs/ca-certificates.crt /etc/ssl/certs/
COPY --from=builder /src/target/release/{bin} /

# Open ports
{exposed_ports}

# Copy local files
{add_files}

# Will run as unprivileged user/group
USER nobody:nobody

# Entry point for the built application
ENTRYPOINT ["/{bin}"]

"""


def render_expose_lines(ports: Iterable[int]) -> str:
    return "".join(f"EXPOSE {port}\n" for port in ports)


def render_copy_lines(files: Iterable[str]) -> str:
    return "".join(f"COPY {path} ./\n" for path in files)


def render_build_definition(
    binary_name: str,
    exposed_ports: Iterable[int],
    add_files: Iterable[str],
    config: Optional[RockerizeConfig] = None,
) -> str:
    """
    Render the build definition for a binary.

    The builder stage compiles the application on the toolchain image; the final
    stage starts from scratch and holds only the binary, CA certificates, the
    unprivileged user/group files, and the requested ports and files.

    Args:
        binary_name: Name of the application binary
        exposed_ports: Ports to expose, one EXPOSE line each
        add_files: Local files to copy into the image root, one COPY line each
        config: Settings for the builder image and file names

    Returns:
        Build definition text
    """
    config = config or RockerizeConfig()
    return DOCKERFILE_TEMPLATE.format(
        definition_filename=config.definition_filename,
        builder_image=config.builder_image,
        maintainer=config.maintainer,
        bin=binary_name,
        exposed_ports=render_expose_lines(exposed_ports),
        add_files=render_copy_lines(add_files),
    )
