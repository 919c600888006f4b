"""ASCII banner printed ahead of terminal reports."""

YOR_LOGO = r"""
 __     __
 \ \   / /__  _ __
  \ \_/ / _ \| '__|
   \   / (_) | |
    |_| \___/|_|
"""
