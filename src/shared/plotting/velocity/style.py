"""
Plotting style for velocity field and diagnostics plots.

Seaborn darkgrid for history plots; the velocity drawing itself uses its own
dark background. Math labels go through matplotlib mathtext, so no TeX
installation is required.
"""

import matplotlib.pyplot as plt
import seaborn as sns

plt.rcParams.update(
    {
        "text.usetex": False,
        "mathtext.fontset": "cm",
        "font.family": "serif",
        "axes.labelsize": 12,
        "font.size": 11,
        "legend.fontsize": 10,
    }
)

# after rcParams, otherwise the theme resets the font family
sns.set_theme(style="darkgrid", rc={"font.family": "serif"})

# Velocity segments: bright yellow on dark grey
BACKGROUND = (0.1, 0.1, 0.1, 1.0)
SEGMENT_COLOR = (1.0, 1.0, 0.0, 1.0)
SEGMENT_WIDTH = 3.0

# One colour per diagnostic so runs are comparable across plots
DIAGNOSTIC_COLORS = dict(
    zip(
        ["divergence_l1", "divergence_l2", "kinetic_energy", "max_speed"],
        sns.color_palette("colorblind", 4),
    )
)
