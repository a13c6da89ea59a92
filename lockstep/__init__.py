"""Keep package.json and package-lock.json versions in lockstep."""
