"""Go toolchain integration: installed checks and ``go get``."""

from gosearch.install.installer import (
    build_install_command,
    find_go_binary,
    install_package,
    is_installed,
)

__all__ = ["build_install_command", "find_go_binary", "install_package", "is_installed"]
