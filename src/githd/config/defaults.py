"""Starter .githd.toml template."""

DEFAULT_TOML = """\
# githd configuration
version = "1.0"

[git]
executable = "git"
timeout = 0               # seconds; 0 = wait for git forever

[log]
page_size = 50            # commits per page for `githd log`

[icons]
theme = "dark"            # light | dark
# root = "path/to/icons"  # default: icons shipped with githd

[output]
format = "terminal"       # terminal | json
"""
