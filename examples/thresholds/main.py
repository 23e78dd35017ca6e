import logging

import numpy as np
from loopfpy import LoopF

formatter = logging.Formatter("%(levelname)s (%(name)s): %(message)s")
console = logging.StreamHandler()
console.setFormatter(formatter)
logger = logging.getLogger("loopfpy")
logger.addHandler(console)
logger.setLevel(logging.INFO)

handler = LoopF("thresholds.yaml")
handler.run()
export = handler.export()

# the Barr-Zee functions and Phi cross their thresholds at w = 1/4 and z = 4
df = export.to_dataframe()
for name, group in df.groupby("function", sort=False):
    values = group["value"].to_numpy()
    jumps = np.abs(np.diff(values))
    print(f"{name:>5}: {values.size} points, largest step between neighbours {jumps.max():.3e}")
