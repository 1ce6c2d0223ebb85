"""CI system integration."""

from .github_output import GitHubOutputWriter, ci_output_values

__all__ = ["GitHubOutputWriter", "ci_output_values"]
