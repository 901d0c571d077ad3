"""Starter .kal.toml template."""

DEFAULT_TOML = """\
# kal configuration

[linters]
# enable = ["*"]            # "*" = every known linter; empty = defaults only
# disable = ["nophase"]     # explicit disable always wins

[lintersConfig.jsonTags]
# jsonTagRegex = "^[a-z][a-z0-9]*(?:[A-Z][a-z0-9]*)*$"

[lintersConfig.optionalOrRequired]
# preferredOptionalMarker = "optional"    # optional | kubebuilder:validation:Optional
# preferredRequiredMarker = "required"    # required | kubebuilder:validation:Required
"""
