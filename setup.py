from setuptools import setup

setup(name="uricomponent",
  version="0.1",
  description="Validation, normalization and encoding-aware comparison of percent-encoded URI components.",
  license="MIT",
  packages=["uricomponent"],
  package_dir={'uricomponent': 'src'},
  install_requires=[],
  extras_require={"test": ["pytest", "hypothesis"]},
  python_requires="~=3.9")
