"""Developer tooling for the Jetpack monorepo."""
