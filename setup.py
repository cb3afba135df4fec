from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="asaas-python",
    version="0.1.0",
    description="Python SDK for the Asaas payments API (v3) - customers, charges, PIX, subscriptions, webhooks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Office/Business :: Financial :: Point-Of-Sale",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: Flask",
        "Framework :: FastAPI",
    ],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dotenv": ["python-dotenv>=1.0.0"],
        "flask": ["flask>=2.0.0"],
        "fastapi": ["fastapi>=0.100.0"],
        "dev": [
            "pytest>=7.0.0",
            "python-dotenv>=1.0.0",
            "flask>=2.0.0",
            "fastapi>=0.100.0",
        ],
    },
    keywords="asaas payment gateway pix boleto api sdk python flask fastapi",
)
