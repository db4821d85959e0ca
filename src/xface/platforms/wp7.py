# Windows Phone 7 platform parser
from xface.platforms.wp8 import Wp8Parser


class Wp7Parser(Wp8Parser):
    """Windows Phone 7 projects share the WP8 layout; only merges and lib dir differ."""

    name = "wp7"
    merges_layers = ("wp", "wp7")
    lib_subdir = "wp7"
    display_name = "Windows Phone 7"
