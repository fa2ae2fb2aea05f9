DOUBLE = 'float64'
LOGGER_NAME = 'matprops'
# environment variable read by matprops.logger.setup_logging()
LOGLEVEL_ENV = 'MATPROPS_LOGLEVEL'
# exponent n of the tetragonal fibre packing in Vanin's conductivity model
TETRAGONAL_PACKING_EXPONENT = 6.
# elastic model used to obtain the Poisson ratios of the thermal expansion
ELASTIC_MODEL_FOR_EXPANSION = 2
