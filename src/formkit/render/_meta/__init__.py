from formkit import setupModule

config, logger = setupModule(__name__)
