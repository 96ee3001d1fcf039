"""Skills database for gap analysis: AI/ML skills with aliases and learning resources."""
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

Importance = Literal["essential", "important", "nice-to-have"]
ResourceType = Literal["course", "documentation", "tutorial", "certification"]


@dataclass(frozen=True)
class LearningResource:
    name: str
    type: ResourceType
    url: str
    provider: str
    is_free: bool


@dataclass(frozen=True)
class Skill:
    """A skill with alternative spellings to match and an importance level."""
    name: str
    category: str
    aliases: Tuple[str, ...]
    importance: Importance
    learning_resources: Tuple[LearningResource, ...] = field(default_factory=tuple)

    @property
    def terms(self) -> Tuple[str, ...]:
        """Name first, then aliases, in match order."""
        return (self.name,) + self.aliases


@dataclass(frozen=True)
class SkillCategory:
    name: str
    description: str
    skills: Tuple[Skill, ...]


def _category(name: str, description: str, *entries) -> SkillCategory:
    """Build a category from (name, aliases, importance[, resources]) entries."""
    skills = []
    for entry in entries:
        skill_name, aliases, importance = entry[:3]
        resources = entry[3] if len(entry) > 3 else ()
        skills.append(Skill(
            name=skill_name,
            category=name,
            aliases=tuple(aliases),
            importance=importance,
            learning_resources=tuple(resources),
        ))
    return SkillCategory(name=name, description=description, skills=tuple(skills))


def _course(name, url, provider, is_free=True):
    return LearningResource(name, "course", url, provider, is_free)


def _docs(name, url, provider, is_free=True):
    return LearningResource(name, "documentation", url, provider, is_free)


SKILL_CATEGORIES: Tuple[SkillCategory, ...] = (
    _category(
        "Programming Languages",
        "Core programming languages for AI/ML development",
        ("Python", ["python3", "python 3", "py"], "essential", [
            _course("Python for Everybody", "https://www.coursera.org/specializations/python", "Coursera"),
            _docs("Official Python Tutorial", "https://docs.python.org/3/tutorial/", "Python.org"),
        ]),
        ("R", ["r programming", "r language", "r stats"], "important", [
            _course("R Programming", "https://www.coursera.org/learn/r-programming", "Coursera"),
        ]),
        ("SQL", ["mysql", "postgresql", "postgres", "sqlite", "tsql", "pl/sql"], "essential", [
            _course("SQL for Data Science", "https://www.coursera.org/learn/sql-for-data-science", "Coursera"),
        ]),
        ("Java", ["java8", "java11", "java17", "jvm"], "important"),
        ("Scala", ["scala 2", "scala 3"], "nice-to-have"),
        ("C++", ["cpp", "c plus plus"], "nice-to-have"),
        ("JavaScript", ["js", "es6", "ecmascript", "node.js", "nodejs"], "nice-to-have"),
        ("TypeScript", ["ts"], "nice-to-have"),
        ("Go", ["golang"], "nice-to-have"),
        ("Rust", ["rust-lang"], "nice-to-have"),
        ("Julia", ["julialang"], "nice-to-have"),
    ),
    _category(
        "ML/AI Frameworks",
        "Machine learning and deep learning frameworks",
        ("TensorFlow", ["tf", "tensorflow 2", "tf2"], "essential", [
            LearningResource("TensorFlow Developer Certificate", "certification",
                             "https://www.tensorflow.org/certificate", "Google", False),
            _docs("TensorFlow Tutorials", "https://www.tensorflow.org/tutorials", "TensorFlow"),
        ]),
        ("PyTorch", ["torch", "pytorch lightning"], "essential", [
            _docs("PyTorch Tutorials", "https://pytorch.org/tutorials/", "PyTorch"),
            _course("Deep Learning with PyTorch",
                    "https://www.udacity.com/course/deep-learning-pytorch--ud188", "Udacity"),
        ]),
        ("Keras", ["keras api"], "important"),
        ("scikit-learn", ["sklearn", "scikit learn"], "essential", [
            _docs("scikit-learn Tutorials", "https://scikit-learn.org/stable/tutorial/index.html",
                  "scikit-learn"),
        ]),
        ("XGBoost", ["xgb"], "important"),
        ("LightGBM", ["lgbm", "light gbm"], "nice-to-have"),
        ("Hugging Face", ["huggingface", "transformers", "hf"], "essential", [
            _course("Hugging Face Course", "https://huggingface.co/learn", "Hugging Face"),
        ]),
        ("LangChain", ["lang chain"], "important", [
            _docs("LangChain Documentation", "https://python.langchain.com/docs/", "LangChain"),
        ]),
        ("OpenAI API", ["openai", "gpt api", "chatgpt api", "gpt-4", "gpt-3"], "important"),
        ("JAX", ["google jax"], "nice-to-have"),
        ("ONNX", ["open neural network exchange"], "nice-to-have"),
        ("Pandas", ["pandas dataframe"], "essential"),
        ("NumPy", ["numpy array", "np"], "essential"),
        ("OpenCV", ["cv2", "opencv-python"], "important"),
        ("spaCy", ["spacy"], "important"),
        ("NLTK", ["natural language toolkit"], "nice-to-have"),
    ),
    _category(
        "Cloud Platforms",
        "Cloud computing and ML platforms",
        ("AWS", ["amazon web services", "sagemaker", "ec2", "s3", "aws lambda"], "essential", [
            LearningResource("AWS Machine Learning Specialty", "certification",
                             "https://aws.amazon.com/certification/certified-machine-learning-specialty/",
                             "AWS", False),
            LearningResource("AWS Free Tier", "tutorial", "https://aws.amazon.com/free/", "AWS", True),
        ]),
        ("Azure", ["microsoft azure", "azure ml", "azure machine learning"], "important", [
            LearningResource("Azure AI Engineer Associate", "certification",
                             "https://learn.microsoft.com/en-us/certifications/azure-ai-engineer/",
                             "Microsoft", False),
        ]),
        ("GCP", ["google cloud", "google cloud platform", "bigquery", "vertex ai", "cloud ai"], "important", [
            LearningResource("Google Cloud ML Engineer", "certification",
                             "https://cloud.google.com/certification/machine-learning-engineer",
                             "Google", False),
        ]),
    ),
    _category(
        "Data Tools",
        "Data processing and engineering tools",
        ("Spark", ["apache spark", "pyspark", "spark sql"], "important", [
            _docs("Apache Spark Documentation", "https://spark.apache.org/docs/latest/", "Apache"),
        ]),
        ("Hadoop", ["hdfs", "hive", "apache hadoop"], "nice-to-have"),
        ("Kafka", ["apache kafka", "kafka streams"], "nice-to-have"),
        ("Airflow", ["apache airflow"], "important", [
            _docs("Airflow Documentation", "https://airflow.apache.org/docs/", "Apache"),
        ]),
        ("dbt", ["data build tool"], "important"),
        ("Databricks", ["databricks workspace"], "important"),
        ("Snowflake", ["snowflake data cloud"], "important"),
    ),
    _category(
        "MLOps & DevOps",
        "ML operations and deployment tools",
        ("Docker", ["containerisation", "containerization", "dockerfile"], "essential", [
            _docs("Docker Documentation", "https://docs.docker.com/", "Docker"),
        ]),
        ("Kubernetes", ["k8s", "kubectl"], "important", [
            _docs("Kubernetes Documentation", "https://kubernetes.io/docs/home/", "Kubernetes"),
        ]),
        ("MLflow", ["ml flow"], "important", [
            _docs("MLflow Documentation", "https://mlflow.org/docs/latest/index.html", "MLflow"),
        ]),
        ("Kubeflow", ["kube flow"], "nice-to-have"),
        ("Git", ["github", "gitlab", "version control", "git version control"], "essential"),
        ("CI/CD", ["cicd", "continuous integration", "continuous deployment", "github actions",
                   "jenkins"], "important"),
        ("Terraform", ["infrastructure as code", "iac"], "nice-to-have"),
        ("FastAPI", ["fast api"], "important"),
        ("Flask", ["flask api"], "nice-to-have"),
    ),
    _category(
        "AI/ML Techniques",
        "Machine learning concepts and methodologies",
        ("Machine Learning", ["ml", "statistical learning"], "essential", [
            _course("Machine Learning by Andrew Ng", "https://www.coursera.org/learn/machine-learning",
                    "Coursera"),
        ]),
        ("Deep Learning", ["dl", "neural networks", "neural network"], "essential", [
            _course("Deep Learning Specialization", "https://www.coursera.org/specializations/deep-learning",
                    "Coursera"),
        ]),
        ("NLP", ["natural language processing", "text mining", "text analytics", "nlp models"], "important", [
            _course("NLP Specialization",
                    "https://www.coursera.org/specializations/natural-language-processing", "Coursera"),
        ]),
        ("Computer Vision", ["cv", "image recognition", "object detection", "image classification"],
         "important"),
        ("LLMs", ["large language models", "llm", "generative ai", "gen ai", "genai"], "essential"),
        ("Transformers", ["transformer architecture", "attention mechanism", "bert", "gpt"], "important"),
        ("Reinforcement Learning", ["rl", "reward learning"], "nice-to-have"),
        ("Time Series", ["time series analysis", "forecasting", "arima", "prophet"], "important"),
        ("Recommendation Systems", ["recommender systems", "collaborative filtering",
                                    "content-based filtering"], "nice-to-have"),
        ("RAG", ["retrieval augmented generation", "retrieval-augmented generation"], "important"),
        ("Fine-tuning", ["fine tuning", "finetuning", "model fine-tuning"], "important"),
        ("Prompt Engineering", ["prompt design", "prompt optimization"], "important"),
        ("Feature Engineering", ["feature extraction", "feature selection"], "essential"),
        ("Model Evaluation", ["model validation", "cross-validation", "hyperparameter tuning"], "essential"),
    ),
    _category(
        "Databases",
        "Database technologies",
        ("PostgreSQL", ["postgres"], "important"),
        ("MongoDB", ["mongo", "nosql"], "nice-to-have"),
        ("Redis", ["redis cache"], "nice-to-have"),
        ("Elasticsearch", ["elastic search", "elastic"], "nice-to-have"),
        ("Vector Databases", ["pinecone", "weaviate", "chroma", "pgvector", "milvus", "qdrant"], "important"),
    ),
    _category(
        "Soft Skills",
        "Professional and interpersonal skills",
        ("Communication", ["communication skills", "written communication", "verbal communication",
                           "stakeholder communication"], "essential"),
        ("Leadership", ["team leadership", "technical leadership", "mentoring", "mentor"], "important"),
        ("Problem Solving", ["problem-solving", "analytical thinking", "critical thinking"], "essential"),
        ("Collaboration", ["teamwork", "cross-functional", "collaborative"], "essential"),
        ("Agile", ["scrum", "sprint", "kanban", "agile methodology"], "important"),
        ("Research", ["research skills", "literature review", "academic research"], "important"),
        ("Presentation", ["presentation skills", "public speaking", "data storytelling"], "important"),
    ),
)


def get_all_skills(categories=SKILL_CATEGORIES) -> List[Skill]:
    """All skills as a flat list, in category order."""
    return [skill for category in categories for skill in category.skills]


def get_skill_by_name(name: str) -> Optional[Skill]:
    """Find a skill by name or alias (case-insensitive)."""
    lower_name = name.strip().lower()
    for skill in get_all_skills():
        if skill.name.lower() == lower_name or any(a.lower() == lower_name for a in skill.aliases):
            return skill
    return None


def get_skills_by_category(category_name: str) -> List[Skill]:
    for category in SKILL_CATEGORIES:
        if category.name.lower() == category_name.lower():
            return list(category.skills)
    return []
