# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed records for 3Commas endpoint families.

- :class:`~threecommas.models.bot.Bot`: DCA bot from ``/ver1/bots``.
- :class:`~threecommas.models.deal.Deal`: Deal from ``/ver1/deals``.
- :class:`~threecommas.models.account.Account`: Exchange account from ``/ver1/accounts``.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files.
"""

__all__ = []
