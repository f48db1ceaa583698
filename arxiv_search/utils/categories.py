"""
arXiv 分类列表

供分类选择框使用，空字符串表示不限分类
"""

ARXIV_CATEGORIES = {
    "": "All Categories",
    "cs.AI": "Artificial Intelligence",
    "cs.CL": "Computation and Language",
    "cs.CV": "Computer Vision",
    "cs.LG": "Machine Learning",
    "cs.NE": "Neural and Evolutionary Computing",
    "cs.CR": "Cryptography and Security",
    "cs.DB": "Databases",
    "cs.DS": "Data Structures and Algorithms",
    "cs.IR": "Information Retrieval",
    "math.CO": "Combinatorics",
    "math.NT": "Number Theory",
    "math.AG": "Algebraic Geometry",
    "physics.comp-ph": "Computational Physics",
    "physics.data-an": "Data Analysis",
    "q-bio.GN": "Genomics",
    "q-bio.NC": "Neurons and Cognition",
    "q-fin.CP": "Computational Finance",
    "stat.ML": "Machine Learning (Statistics)",
    "stat.AP": "Applications (Statistics)",
}


def category_label(value: str) -> str:
    """未收录的分类直接返回分类代码本身"""
    return ARXIV_CATEGORIES.get(value, value)
