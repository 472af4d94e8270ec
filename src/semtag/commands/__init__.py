# SPDX-License-Identifier: MIT
"""semtag subcommands."""
