from Bio.Data import IUPACData

# Alphabets
BIO_DNA_BASES = "ACGT"
BIO_RNA_BASES = "ACGU"
BIO_NUCLEOTIDE_AMBIGUITY_CODES = "RYSWKMBDHVN"
BIO_DNA_ALPHABET = frozenset(IUPACData.ambiguous_dna_letters)
BIO_RNA_ALPHABET = frozenset(IUPACData.ambiguous_rna_letters)
BIO_PROTEIN_AMBIGUITY_CODES = "BJOUXZ"
BIO_PROTEIN_ALPHABET = frozenset(IUPACData.extended_protein_letters)

FASTA_HEADER_PREFIX = ">"

# Genetic code
BIO_STANDARD_TABLE_ID = 1
BIO_DNA_START_CODON = "ATG"
BIO_STOP_SYMBOL = "*"
BIO_UNKNOWN_RESIDUE = "X"
CODON_LENGTH = 3
READING_FRAMES = (0, 1, 2)

# Protein properties
AVERAGE_RESIDUE_MASS = 110.0
WATER_MASS = 18.02
HYDROPHOBIC_RESIDUES = frozenset("AILMFWYV")
NEUTRAL_VALUE = 0.0

# Rounding
PERCENTAGE_MULTIPLIER = 100
CONTENT_DECIMALS = 2
SKEW_DECIMALS = 3
PROPERTY_DECIMALS = 2
BIAS_DECIMALS = 4

# Codon usage
DEFAULT_TOP_CODON_COUNT = 5
CODON_SPACE_SIZE = 64

# Knowledge base defaults
GC_LOW_THRESHOLD = 40.0
GC_HIGH_THRESHOLD = 60.0
GC_EXTREME_LOW_THRESHOLD = 25.0
GC_EXTREME_HIGH_THRESHOLD = 75.0

LENGTH_SHORT_THRESHOLD = 50
LENGTH_MEDIUM_THRESHOLD = 500
LENGTH_LONG_THRESHOLD = 2000
LENGTH_VERY_LONG_THRESHOLD = 10000

# Quality scoring
QUALITY_MAX_SCORE = 100
QUALITY_MIN_SCORE = 0
AMBIGUOUS_HIGH_PERCENT = 5.0
AMBIGUOUS_MODERATE_PERCENT = 1.0
PENALTY_HIGH_AMBIGUITY = 20
PENALTY_MODERATE_AMBIGUITY = 5
PENALTY_EXTREME_GC = 15
PENALTY_SHORT_SEQUENCE = 10
PENALTY_TANDEM_REPEAT = 5
TANDEM_REPEAT_MIN_UNIT = 3
TANDEM_REPEAT_MIN_COPIES = 4
TANDEM_REPEAT_MAX_UNIT = 50

# Insight calibration
INSIGHT_QUALITY_SCORE_THRESHOLD = 70
INSIGHT_GC_SKEW_THRESHOLD = 0.1
INSIGHT_SIGNIFICANT_ORF_LENGTH = 100
INSIGHT_MULTIPLE_ORF_COUNT = 3
INSIGHT_CODON_BIAS_THRESHOLD = 0.02
INSIGHT_MUTATION_RATE_THRESHOLD = 5.0
INSIGHT_MISSENSE_COUNT_THRESHOLD = 5
INSIGHT_SIMILARITY_THRESHOLD = 80.0
INSIGHT_HYDROPHOBIC_THRESHOLD = 1.0
INSIGHT_HYDROPHILIC_THRESHOLD = -1.0
INSIGHT_BASIC_PI_THRESHOLD = 8.0
INSIGHT_ACIDIC_PI_THRESHOLD = 6.0

# Protein domain heuristics
TRANSMEMBRANE_MIN_RUN = 15
SIGNAL_PEPTIDE_WINDOW = 20
SIGNAL_PEPTIDE_MIN_HYDROPHOBIC = 10
TRANSMEMBRANE_DOMAIN_LABEL = "Potential transmembrane domain"
SIGNAL_PEPTIDE_LABEL = "Potential signal peptide"

# Research question keywords
DISEASE_KEYWORDS = ("disease", "pathogen")
EXPRESSION_KEYWORDS = ("expression", "cloning")
DRUG_KEYWORDS = ("drug", "target")

# Context mapping keys accepted from callers
CONTEXT_KEY_ALIASES = {
    "question": "question",
    "referenceSequence": "reference_sequence",
    "reference_sequence": "reference_sequence",
    "targetOrganism": "target_organism",
    "target_organism": "target_organism",
    "analysisGoal": "analysis_goal",
    "analysis_goal": "analysis_goal",
}

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
ENV_PREFIX = "SEQINSIGHT_"
