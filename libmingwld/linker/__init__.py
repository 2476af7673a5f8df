"""Translation of parsed GNU ld arguments into `lld-link` command and its invocation."""
