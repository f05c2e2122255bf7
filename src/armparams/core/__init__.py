"""Runtime plumbing shared by every armparams command."""
