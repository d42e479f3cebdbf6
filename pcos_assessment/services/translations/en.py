# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.success": "Success",
    "dialog.info": "Information",

    # Error Messages - API
    "error.api.connection": "Could not reach the analysis service. Please check your connection.",
    "error.api.timeout": "The analysis service did not respond in time. Please try again.",
    "error.api.validation": "The analysis service rejected the assessment:\n{details}",
    "error.api.server": "The analysis service reported an error. Please try again later.",
    "error.api.invalid_response": "The analysis service returned an unreadable result.",

    # Error Messages - General
    "error.unexpected": "An unexpected error occurred.",
    "error.submit_failed": "Submission failed:\n{details}",
    "error.export_failed": "Could not export the report:\n{details}",

    # Wizard
    "wizard.title": "Clinical Assessment",
    "wizard.progress": "Step {current} of {total}: {title}",
    "wizard.button.back": "Back",
    "wizard.button.continue": "Continue",
    "wizard.button.accept": "Accept && Continue",
    "wizard.button.submit": "Submit for Analysis",
    "wizard.button.submitting": "Submitting...",
    "wizard.step.consent": "Consent & Privacy",
    "wizard.step.demographics": "Demographics",
    "wizard.step.symptoms": "Symptoms & History",
    "wizard.step.vitals": "Vital Signs",
    "wizard.step.labs": "Laboratory Values",
    "wizard.step.imaging": "Medical Imaging",
    "wizard.step.review": "Review & Submit",
    "wizard.select_placeholder": "Select...",

    # Consent
    "consent.heading": "Consent & Privacy Notice",
    "consent.description": "Please review and accept the following terms before proceeding with your clinical assessment.",
    "consent.privacy.title": "Your Privacy Matters",
    "consent.privacy.body": (
        "All personal health information (PHI) is strictly de-identified before processing. "
        "We employ state-of-the-art encryption and comply with HIPAA regulations to protect your data."
    ),
    "consent.data_collection.title": "Data Collection & Processing",
    "consent.data_collection.body": "I consent to the collection and processing of my clinical data for risk assessment purposes.",
    "consent.data_storage.title": "Secure Storage",
    "consent.data_storage.body": (
        "I consent to secure, encrypted storage of my de-identified health data "
        "for model improvement and continuous learning."
    ),
    "consent.synthetic_generation.title": "Synthetic Data Generation",
    "consent.synthetic_generation.body": (
        "I consent to my de-identified data being used to generate synthetic clinical records via GANs "
        "for research and model training (no identifiable information will be retained)."
    ),
    "consent.research_use.title": "Research Use",
    "consent.research_use.body": (
        "I consent to anonymized use of my data for clinical research and publication "
        "(fully de-identified, no individual traceability)."
    ),

    # Demographics
    "demographics.heading": "Demographics",
    "demographics.description": "Basic demographic and anthropometric information",
    "demographics.age": "Age *",
    "demographics.age.placeholder": "Years",
    "demographics.sex": "Sex *",
    "demographics.ethnicity": "Ethnicity",
    "demographics.height": "Height (cm) *",
    "demographics.height.placeholder": "e.g., 165",
    "demographics.weight": "Weight (kg) *",
    "demographics.weight.placeholder": "e.g., 70",
    "demographics.waist": "Waist Circumference (cm)",
    "demographics.waist.placeholder": "e.g., 80",
    "demographics.bmi": "Calculated BMI",

    # Symptoms
    "symptoms.heading": "Symptoms & Medical History",
    "symptoms.description": "Information about symptoms and family medical history",
    "symptoms.menstrual_cycle": "Menstrual Cycle Regularity",
    "symptoms.current": "Current Symptoms",
    "symptoms.family_history": "Family Medical History",

    # Vitals
    "vitals.heading": "Vital Signs",
    "vitals.description": "Recent vital sign measurements",
    "vitals.systolic": "Systolic Blood Pressure (mmHg)",
    "vitals.systolic.placeholder": "e.g., 120",
    "vitals.diastolic": "Diastolic Blood Pressure (mmHg)",
    "vitals.diastolic.placeholder": "e.g., 80",
    "vitals.heart_rate": "Resting Heart Rate (bpm)",
    "vitals.heart_rate.placeholder": "e.g., 72",
    "vitals.bp_reading": "Blood Pressure Reading",
    "vitals.bp_value": "{systolic}/{diastolic} mmHg",
    "vitals.bp_elevated": "Elevated - consider clinical evaluation",
    "vitals.bp_normal": "Normal range",

    # Labs
    "labs.heading": "Laboratory Values",
    "labs.description": "Recent lab test results (all fields optional, but more data improves accuracy)",
    "labs.metabolic_panel": "Metabolic Panel",
    "labs.lipid_panel": "Lipid Panel (mg/dL)",
    "labs.hormonal_panel": "Hormonal Panel",
    "labs.glucose": "Fasting Glucose",
    "labs.hba1c": "HbA1c (%)",
    "labs.insulin": "Fasting Insulin (μU/mL)",
    "labs.total_cholesterol": "Total Cholesterol",
    "labs.hdl": "HDL Cholesterol",
    "labs.ldl": "LDL Cholesterol",
    "labs.triglycerides": "Triglycerides",
    "labs.lh": "LH (mIU/mL)",
    "labs.fsh": "FSH (mIU/mL)",
    "labs.testosterone": "Total Testosterone (ng/dL)",
    "labs.shbg": "SHBG (nmol/L)",
    "labs.tsh": "TSH (μIU/mL)",
    "labs.prolactin": "Prolactin (ng/mL)",
    "labs.homa_ir": "Calculated HOMA-IR",
    "labs.insulin_resistance": "Indicates insulin resistance",
    "labs.lh_fsh_ratio": "LH/FSH Ratio",
    "labs.lh_fsh_elevated": "Elevated - common in PCOS",
    "labs.normal": "Normal range",

    # Imaging
    "imaging.heading": "Medical Imaging",
    "imaging.description": "Upload ultrasound images and related measurements (optional but improves accuracy)",
    "imaging.upload_prompt": "Click to upload pelvic ultrasound images",
    "imaging.upload_hint": "DICOM, PNG, JPEG supported • Max 20MB per file",
    "imaging.choose_files": "Choose Files",
    "imaging.file_dialog_title": "Select ultrasound images",
    "imaging.file_dialog_filter": "Images (*.png *.jpg *.jpeg *.bmp *.tif *.tiff *.dcm);;All files (*)",
    "imaging.uploaded": "Uploaded Images ({count})",
    "imaging.files_added": "{count} file(s) added successfully",
    "imaging.remove": "Remove",
    "imaging.measurements": "Ovarian Measurements",
    "imaging.ovarian_volume": "Ovarian Volume (cm³)",
    "imaging.ovarian_volume.placeholder": "e.g., 12.5",
    "imaging.follicle_count": "Antral Follicle Count",
    "imaging.follicle_count.placeholder": "e.g., 15",
    "imaging.rotterdam": "Antral follicle count ≥12 is one of the Rotterdam criteria for PCOS diagnosis",

    # Review
    "review.heading": "Review & Submit",
    "review.description": "Please review your information before submitting for analysis",
    "review.consent.title": "Consent Confirmed",
    "review.consent.body": "All required consents have been accepted. Your data will be processed securely.",
    "review.completeness": "Data Completeness",
    "review.complete": "Complete",
    "review.incomplete": "Incomplete",
    "review.completeness_note": (
        "Note: More complete data improves prediction accuracy. "
        "Incomplete sections won't prevent submission."
    ),
    "review.section.demographics": "Demographics",
    "review.section.symptoms": "Symptoms",
    "review.section.vitals": "Vital Signs",
    "review.section.labs": "Laboratory Values",
    "review.section.imaging": "Medical Imaging",
    "review.key_metrics": "Key Metrics",
    "review.bmi": "BMI",
    "review.homa_ir": "HOMA-IR",
    "review.lh_fsh_ratio": "LH/FSH Ratio",
    "review.method": "Analysis Method",
    "review.method.model": "Model: {model} (Generative Adversarial Network + Physics-Informed Neural Network)",
    "review.method.training": "Training: Public clinical datasets + synthetic augmentation (n=12,453 records)",
    "review.method.validation": "Validation: Physiological constraint checking via PINN residuals",
    "review.submitting": "Submitting assessment... Processing your data with the {model} model",
    "review.submitted": "Assessment complete! Your results are ready for review",

    # Results
    "results.title": "Assessment Results",
    "results.generated_on": "Generated on {date}",
    "results.export_pdf": "Export PDF",
    "results.share": "Share with Clinician",
    "results.share_unavailable": "Sharing with a clinician is not available yet.",
    "results.new_assessment": "New Assessment",
    "results.overall": "Overall Risk Assessment",
    "results.risk_badge": "{level} RISK",
    "results.risk_profile": "Your assessment indicates a {level} risk profile for PCOS and metabolic syndrome.",
    "results.pcos_probability": "PCOS Probability",
    "results.metabolic_risk": "Metabolic Syndrome Risk",
    "results.consultation.title": "Clinical Consultation Recommended",
    "results.consultation.body": (
        "Based on your assessment, we strongly recommend consulting with a healthcare provider "
        "for further evaluation and personalized treatment options."
    ),
    "results.factors.title": "Key Contributing Factors",
    "results.factors.description": "Primary indicators influencing your risk assessment",
    "results.physio.title": "Physiological Validation",
    "results.physio.description": "Physics-informed constraint analysis",
    "results.physio.residual": "Residual: {value}",
    "results.physio.note": (
        "PINN residuals measure how well your data aligns with known physiological relationships. "
        "Low residuals indicate high confidence."
    ),
    "results.recommendations.title": "Personalized Recommendations",
    "results.recommendations.description": "Evidence-based next steps based on your assessment",
    "results.model.title": "Model Information",
    "results.model.version": "Model Version",
    "results.model.training": "Training Dataset",
    "results.model.updated": "Last Updated",
    "results.export.dialog_title": "Export results",
    "results.export.filter": "PDF files (*.pdf)",
    "results.export.success": "Report saved to:\n{path}",
}
