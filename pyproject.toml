[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small teaching programs: AVL and Huffman trees, in-place sorting algorithms, and introductory calculators and games"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "avl-tree", "huffman", "sorting", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-avl = "coursekit.avl_app:main"
coursekit-sort = "coursekit.sort_demo:main"
coursekit-huffman = "coursekit.huffman:main"
coursekit-recipe = "coursekit.recipe:main"
coursekit-shipping = "coursekit.shipping:main"
coursekit-grades = "coursekit.grades:main"
coursekit-morra = "coursekit.morra:main"
coursekit-pizza = "coursekit.pizza:main"
coursekit-circle = "coursekit.circle:main"
coursekit-arrays = "coursekit.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"
