"""
Ordinary least-squares fit of a rate series against its day index.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.regression.fit import RegressionFit, fit, r_squared

__all__ = ["RegressionFit", "fit", "r_squared"]
