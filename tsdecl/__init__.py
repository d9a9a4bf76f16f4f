"""Java source to TypeScript declaration generator."""
