"""
commatrix: cluster communication matrix toolkit

Builds the matrix of expected ingress flows per node role, normalizes it,
diffs it against observed traffic and exports it as CSV, JSON, YAML or
nftables rules.
"""

__version__ = "0.1.0"
