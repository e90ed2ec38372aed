"""DevSecOps demo application with intentional security anti-patterns."""
