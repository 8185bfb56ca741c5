"""cscaffold -- scaffolds minimal CMake projects for C and C++.

Quick usage::

    cscaffold --name demo --language CPP
    cscaffold            # interactive prompts
"""

__version__ = "0.1.0"
