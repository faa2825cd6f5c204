# Quality assessment messages
HIGH_AMBIGUITY_ISSUE = "High ambiguous character content: {percentage:.1f}%"
MODERATE_AMBIGUITY_WARNING = "Moderate ambiguous character content: {percentage:.1f}%"
SHORT_SEQUENCE_WARNING = "Very short sequence - may limit analysis accuracy"
VERY_LONG_SEQUENCE_WARNING = "Very long sequence - consider analyzing in segments"
EXTREME_GC_WARNING = "Extreme GC content: {gc_content:.1f}%"
TANDEM_REPEAT_WARNING = "Repetitive sequences detected"

# Quality insights
LOW_QUALITY_TITLE = "Low Sequence Quality Detected"
LOW_QUALITY_DESCRIPTION = "Quality score: {score}/100. {issues}"
QUALITY_NOTICE_TITLE = "Sequence Quality Notice"
QUALITY_NOTICE_DESCRIPTION = "{warning}"

# Composition insights
HIGH_GC_TITLE = "High GC Content"
HIGH_GC_DESCRIPTION = (
    "GC content of {gc_content:.1f}% may result in strong secondary structures "
    "and higher melting temperature."
)
LOW_GC_TITLE = "Low GC Content"
LOW_GC_DESCRIPTION = (
    "GC content of {gc_content:.1f}% suggests AT-rich regions, potentially indicating "
    "regulatory sequences."
)
GC_SKEW_TITLE = "Significant GC Skew Detected"
GC_SKEW_DESCRIPTION = (
    "GC skew of {gc_skew:.3f} may indicate replication origin or transcriptional bias."
)

# Functional insights
SIGNIFICANT_ORF_TITLE = "Significant ORF Found"
SIGNIFICANT_ORF_DESCRIPTION = (
    "Longest ORF encodes {protein_length} amino acids (frame {frame}, "
    "{start}-{end}), suggesting potential coding sequence."
)
MULTIPLE_ORFS_TITLE = "Multiple ORFs Detected"
MULTIPLE_ORFS_DESCRIPTION = (
    "{orf_count} ORFs found ({frame_distribution}). Consider frame selection for "
    "optimal protein expression."
)
CODON_BIAS_TITLE = "Codon Bias Detected"
CODON_BIAS_DESCRIPTION = (
    "Codon bias of {codon_bias:.3f} suggests optimization may improve expression."
)
MOTIF_TITLE = "{name} Detected"
MOTIF_DESCRIPTION = "Found {count} instance(s) of {name}: {function}"
DOMAIN_TITLE = "{domain}"
DOMAIN_DESCRIPTION = "{domain} predicted from the hydrophobicity profile of the sequence."

# Protein property insights
HYDROPHOBIC_PROTEIN_TITLE = "Hydrophobic Protein"
HYDROPHOBIC_PROTEIN_DESCRIPTION = (
    "Mean hydropathy of {hydropathy:.2f} suggests a membrane-associated or structural protein."
)
HYDROPHILIC_PROTEIN_TITLE = "Hydrophilic Protein"
HYDROPHILIC_PROTEIN_DESCRIPTION = (
    "Mean hydropathy of {hydropathy:.2f} suggests a soluble enzyme or signaling protein."
)
BASIC_PROTEIN_TITLE = "Basic Protein"
BASIC_PROTEIN_DESCRIPTION = (
    "Estimated pI of {isoelectric_point:.2f} - may bind DNA/RNA or function in alkaline conditions."
)
ACIDIC_PROTEIN_TITLE = "Acidic Protein"
ACIDIC_PROTEIN_DESCRIPTION = (
    "Estimated pI of {isoelectric_point:.2f} - may be involved in metal binding or acidic environments."
)

# Comparative insights
HIGH_MUTATION_RATE_TITLE = "High Mutation Rate"
HIGH_MUTATION_RATE_DESCRIPTION = (
    "{mutation_rate:.1f}% mutation rate detected. Significant sequence divergence from reference."
)
NONSENSE_TITLE = "Nonsense Mutations Detected"
NONSENSE_DESCRIPTION = (
    "{nonsense_count} nonsense mutation(s) create premature stop codons, likely affecting "
    "protein function."
)
MISSENSE_TITLE = "Missense Mutations Predominant"
MISSENSE_DESCRIPTION = (
    "{missense_count} missense mutations may affect protein structure and function. "
    "Consider structural analysis."
)
LOW_SIMILARITY_TITLE = "Low Sequence Similarity"
LOW_SIMILARITY_DESCRIPTION = (
    "{similarity:.1f}% similarity to reference suggests significant evolutionary divergence."
)

# Contextual insights
DISEASE_CONTEXT_TITLE = "Disease Research Context"
DISEASE_CONTEXT_DESCRIPTION = (
    "For disease-related analysis, consider comparing with ClinVar, OMIM, or pathogen databases."
)
EXPRESSION_TITLE = "Expression Optimization Recommended"
EXPRESSION_DESCRIPTION = (
    "High codon bias detected. Consider codon optimization for your target expression system."
)
DRUG_TARGET_TITLE = "Drug Target Analysis"
DRUG_TARGET_DESCRIPTION = (
    "For drug target analysis, consider binding pocket prediction and druggability assessment."
)

# Optimization insights
RARE_CODONS_TITLE = "Rare Codons Detected"
RARE_CODONS_DESCRIPTION = (
    "{rare_codon_count} rare codons found for {target_organism}. Consider codon optimization."
)
LONG_SEQUENCE_TITLE = "Long Sequence Detected"
LONG_SEQUENCE_DESCRIPTION = (
    "Consider analyzing in segments or using specialized tools for long sequence analysis."
)
