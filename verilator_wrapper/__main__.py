# SPDX-License-Identifier: BSD-2-Clause
from .cli import main

if __name__ == "__main__":
    main()
