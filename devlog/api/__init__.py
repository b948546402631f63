"""devlog API layer: one subpackage per domain, ``cmd_*`` functions return StageResult."""
