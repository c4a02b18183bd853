import logging

import numpy as np

from tlnn import Network
from tlnn.core.logger import setup_logging
from tlnn.data import decreasing


setup_logging()
logger = logging.getLogger('decreasing')

random_state = np.random.RandomState(1234)

# Learn the line y = 1 - x from four points ###################################

inputs, outputs = decreasing.make_dataset()

net = Network(1, 8, 1, random_state=random_state)
net.train(inputs, outputs, count=len(inputs),
          epoch_count=50, learning_rate=0.2)

# Check if learned ############################################################

for x in inputs:
    y = net.evaluate([x])
    logger.info("input %.3f  outputs %.3f", x, y[0])
