"""Numeric constants shared by the loop-function families."""

PI = 3.1415926535897932
PI2 = 9.8696044010893586  # Pi^2
LOG2 = 0.69314718055994531  # Log[2]
LOG4 = 1.3862943611198906  # Log[4]

# Phi(u, v) at u = v = 1, i.e. 4/Sqrt[3] Cl2(Pi/3)
PHI_DEGENERATE = 2.343907238689459
