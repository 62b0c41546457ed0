#!/usr/bin/env python3
from aeroscad import *

gap = 4

with open('hinge-fit.scad', 'w') as fp:
    Scene(fn=25)(
        hinge.test_mount(),
        hinge.test_hinge() * translate(y=8 + gap),
        hinge.hinge(3, 4., 4.) * translate(y=-(8 + gap)),
    ).dump(fp)
