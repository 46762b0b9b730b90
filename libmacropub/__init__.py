"""Library part of macropub: token model, macro definition parser, rewriter and capability prober."""
