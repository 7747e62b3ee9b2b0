"""Tool identifiers, specs, aliases, runners, progress bars, trust prompts and logging for Roblox project toolchains."""

__version__ = "1.0.0"