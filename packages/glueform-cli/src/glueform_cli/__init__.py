"""glueform-cli: command line interface for glueform.

Compiles the Glue section of serverless.yml into a CloudFormation template.
"""

from __future__ import annotations

__version__ = "0.1.0"
