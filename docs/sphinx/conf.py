# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for deflex documentation."""

project = "deflex"
author = "Deflex Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
